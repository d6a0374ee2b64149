"""Entry point: python -m services.cockpit"""

import asyncio
import logging
import signal

from services.cockpit.cockpit import CockpitService


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    cockpit = CockpitService()
    loop = asyncio.get_running_loop()

    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        logging.getLogger(__name__).info("Shutdown signal received")
        stop_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _signal_handler)

    await cockpit.start()
    logging.getLogger(__name__).info("Cockpit is running. Press Ctrl+C to stop.")

    await stop_event.wait()
    await cockpit.stop()


if __name__ == "__main__":
    asyncio.run(main())
