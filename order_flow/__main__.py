"""Allow ``python -m order_flow``."""

from order_flow.cli.place_order import main

if __name__ == "__main__":
    main()
