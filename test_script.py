import asyncio
import os
from collections import Counter
from loguru import logger
from weighted_selector import AsyncSelector, RandomSelector, RoundRobinSelector, SmoothSelector
from weighted_selector.presets.nginx import NginxUpstream

logger.add("test_output.log", format="{time} {level} {message}", level="DEBUG")

async def mock_request(upstreams: AsyncSelector, request_id: int) -> str:
    backend = await upstreams.next()
    logger.debug(f"Request {request_id} routed to {backend}")
    await asyncio.sleep(0.01) # Simulate network latency
    return backend

async def main():
    os.environ["NGINX_UPSTREAM"] = "node-1:8000=5,node-2:8000=1,node-3:8000=1"

    preset_result = NginxUpstream.get_instance()
    if not preset_result.success:
        logger.error(f"Failed to initialize: {preset_result.error}")
        return

    upstreams = AsyncSelector(preset_result.data.selector)

    logger.info("Routing 70 concurrent requests...")
    results = await asyncio.gather(*[mock_request(upstreams, i) for i in range(70)])

    logger.info("Requests completed. Distribution:")
    for backend, count in Counter(results).most_common():
        logger.info(f"Backend: {backend} | Requests: {count}")

    for selector in (RandomSelector(seed=1), RoundRobinSelector(), SmoothSelector()):
        for item, weight in preset_result.data.all():
            selector.add(item, weight)
        picks = [selector.next() for _ in range(7)]
        logger.info(f"{selector.kind.value:>10}: {' '.join(p.split(':')[0] for p in picks)}")

if __name__ == "__main__":
    asyncio.run(main())
