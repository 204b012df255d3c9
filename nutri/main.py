import logging

import uvicorn
from nutri.api.api_run import app
from nutri.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from nutri.utilities.network import server_urls


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url, *other_urls = server_urls(APP_HOST, APP_PORT)
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    for url in other_urls:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
