"""Entry point for running the export rq worker

Usage:
    python -m src.worker.export_worker
"""
import logging
from redis import Redis
from rq import Queue, Worker
from config import ApplicationConfig

logger = logging.getLogger(__name__)


def run() -> None:
    """Start an rq worker bound to the export queue"""
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    connection = Redis.from_url(ApplicationConfig.REDIS_URL)
    queue = Queue(ApplicationConfig.EXPORT_QUEUE_NAME, connection=connection)
    worker_name = ApplicationConfig.EXPORT_WORKER_NAME

    logger.info(f"Starting export worker '{worker_name or 'anonymous'}' on queue '{queue.name}'")

    worker = Worker([queue], connection=connection, name=worker_name)
    # The scheduler releases retries once their backoff interval has passed
    worker.work(with_scheduler=True)


if __name__ == "__main__":
    run()
