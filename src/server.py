"""Protean Engine runner for the Reviews domain.

In production (PROTEAN_ENV=production) events are processed asynchronously:
the Engine picks them up and runs the ReviewListing projector.

Usage:
    PROTEAN_ENV=production python src/server.py
"""

import asyncio

from protean.server.engine import Engine


async def run():
    from reviews.domain import reviews

    reviews.init()
    await Engine(reviews).run()


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
