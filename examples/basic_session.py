"""
Basic Session Example - Log in to an Itero server, call it, log off.

Configure with environment variables, e.g.:
    ITERO_BASE_URL=https://itero.example/a
    ITERO_STORAGE_PATH=~/.itero/session.json
    ITERO_USER=alice ITERO_PASSWORD=secret
"""

import asyncio
import logging
import os

from itero_session import LoginError, SessionClient, SessionConfig


async def main():
    logging.basicConfig(level=logging.INFO)

    config = SessionConfig.from_env()
    async with SessionClient(config) as client:
        client.subscribe(lambda info: print(f"Session changed: {info.to_dict()}"))

        # Pick up the session of a previous run
        if client.check_session():
            print(f"Welcome back {client.info.user}")
        else:
            try:
                await client.login(os.environ["ITERO_USER"], os.environ["ITERO_PASSWORD"])
            except LoginError as e:
                print(f"Login failed: {e}")
                return

        response = await client.get("/list")
        print(f"/list -> HTTP {response.status_code}")

        print(f"Direct link: {client.make_url('/r/list')}")

        # Logout
        client.logoff()


if __name__ == "__main__":
    asyncio.run(main())
