from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from databases.mongo import MODELS
from utils.constants import DATABASE_NAME, MONGODB_URI
from utils.logging import logger

_client: AsyncIOMotorClient | None = None


def get_client() -> AsyncIOMotorClient:
    """Lazily create the shared Motor client"""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(MONGODB_URI)
    return _client


async def init_db() -> None:
    """Initialize the MongoDB connection and Beanie models"""
    logger.info("Connecting to MongoDB...")
    logger.info(f"DATABASE_NAME: {DATABASE_NAME}")
    await init_beanie(database=get_client()[DATABASE_NAME], document_models=MODELS)
    logger.info("MongoDB connected and Beanie models initialized.")


def close_db() -> None:
    """Close the shared Motor client"""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB connection closed.")
