import logging

from dotenv import load_dotenv

from cwmanage import Client, ConnectWiseError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("system_info")

# Load environment variables from .env file
load_dotenv()

if __name__ == "__main__":
    client = Client.from_env()

    try:
        # /system/info returns a single object, not a list
        info = client.get_single("/system/info")
        print(f"Version: {info.get('version')}")
        print(f"Cloud: {info.get('isCloud')}")
        print(f"Server time zone: {info.get('serverTimeZone')}")
    except ConnectWiseError as e:
        logger.error(f"Failed to get system info: {e.message}")
        if e.http_status:
            print(f"HTTP status: {e.http_status}")
