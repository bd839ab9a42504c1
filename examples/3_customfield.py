import argparse
import logging

from dotenv import load_dotenv

from cwmanage import (
    ApplicationError,
    Client,
    ConnectWiseError,
    CustomFieldNotFoundError,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("custom_field")

load_dotenv()


def parse_value(raw):
    """Custom field values are typed; map common literals."""
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        return raw


def main():
    parser = argparse.ArgumentParser(description="Read or update a custom field on a record")
    parser.add_argument("path", help="Record path, e.g. /company/companies/250")
    parser.add_argument("caption", help="Custom field caption, e.g. EPL")
    parser.add_argument("--set", dest="value", help="New value for the field")
    args = parser.parse_args()

    client = Client.from_env()

    try:
        current = client.get_custom_field(args.path, args.caption)
        print(f"{args.caption} = {current!r}")

        if args.value is not None:
            client.patch_custom_field(args.path, args.caption, parse_value(args.value))
            updated = client.get_custom_field(args.path, args.caption)
            print(f"{args.caption} updated to {updated!r}")

    except CustomFieldNotFoundError as e:
        logger.error(e.message)
        return 1
    except ApplicationError as e:
        # 200 response with an error payload
        logger.error(f"Update rejected: {e.message}")
        for error in e.errors:
            logger.error(f"  {error}")
        return 1
    except ConnectWiseError as e:
        logger.error(f"Request failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
