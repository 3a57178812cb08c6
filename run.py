"""Quick run script for RFP Assistant."""

import sys

# Load environment variables
from dotenv import load_dotenv
load_dotenv()


def main():
    """Main entry point."""
    from rfp_assistant.main import main as cli_main
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
