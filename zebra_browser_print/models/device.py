"""
Device Model
============

Describes one printer reachable through the Browser Print agent.
"""

from dataclasses import dataclass
from typing import Any, Dict

# Attribute name -> agent wire name
_WIRE_NAMES = {
    'name': 'name',
    'device_type': 'deviceType',
    'connection': 'connection',
    'uid': 'uid',
    'provider': 'provider',
    'manufacturer': 'manufacturer',
    'version': 'version',
}


@dataclass(frozen=True)
class Device:
    """Printer descriptor as reported by the agent."""

    name: str = ""
    device_type: str = ""  # printer, ...
    connection: str = ""  # usb, network, driver, bluetooth
    uid: str = ""
    provider: str = ""
    manufacturer: str = ""
    version: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the agent's JSON representation."""
        return {wire: getattr(self, attr) for attr, wire in _WIRE_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Device':
        """Create from the agent's JSON representation. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise TypeError(f"Device data must be a dict, got {type(data).__name__}")
        values = {}
        for attr, wire in _WIRE_NAMES.items():
            if wire in data and data[wire] is not None:
                values[attr] = data[wire]
        if 'version' in values:
            try:
                values['version'] = int(values['version'])
            except (TypeError, ValueError):
                values['version'] = 0
        return cls(**values)

    def __str__(self) -> str:
        return f"{self.name} ({self.connection}, {self.uid})"
