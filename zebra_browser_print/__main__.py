"""Run the command-line client: python -m zebra_browser_print"""

from .cli import main

if __name__ == '__main__':
    main()
