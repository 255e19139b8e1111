"""Allow ``python -m presenter_hub``."""

from presenter_hub.cli import main

if __name__ == "__main__":
    main()
