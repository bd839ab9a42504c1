import argparse
import json
import logging

from dotenv import load_dotenv

from cwmanage import Client, ConnectWiseError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("list_members")

load_dotenv()


def list_members(client, conditions=None):
    """
    Get every member, following pagination.

    Args:
        client: Configured ConnectWise client
        conditions: Optional conditions string, e.g. "inactiveFlag = false"

    Returns:
        List of member records with id and identifier
    """
    query = [("fields", "id,identifier,inactiveFlag")]
    if conditions:
        query.append(("conditions", conditions))
    return client.get_all("/system/members", query)


def main():
    parser = argparse.ArgumentParser(description="List ConnectWise members")
    parser.add_argument("--conditions", help="Conditions to filter members by")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    args = parser.parse_args()

    client = Client.from_env()

    try:
        members = list_members(client, args.conditions)
    except ConnectWiseError as e:
        logger.error(f"Could not list members: {e}")
        return 1

    if args.json:
        print(json.dumps(members, indent=2))
    else:
        for member in members:
            print(f"{member.get('id'):>6}  {member.get('identifier')}")
        print(f"\nTotal: {len(members)} members")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
