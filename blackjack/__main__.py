"""Allow ``python -m blackjack``."""

from terminal_ui.app import main

if __name__ == "__main__":
    main()
