from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv
import os
import logging
from pathlib import Path

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

logger = logging.getLogger(__name__)

class Database:
    client: AsyncIOMotorClient = None
    db = None

    async def connect(self):
        try:
            mongo_url = os.environ['MONGO_URL']
            self.client = AsyncIOMotorClient(mongo_url)
            self.db = self.client[os.environ['DB_NAME']]
            # Verify connection
            await self.db.command("ping")
            logger.info(f"Connected to MongoDB: {os.environ['DB_NAME']}")

            await self._create_indexes()
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def close(self):
        if self.client:
            self.client.close()
            logger.info("MongoDB connection closed")

    def get_db(self):
        return self.db

    async def _create_indexes(self):
        """Create MongoDB indexes for Briefly collections."""
        try:
            # Users - email login lookups must be unique
            await self.db.briefly_users.create_index("user_id", unique=True)
            await self.db.briefly_users.create_index("email", unique=True)

            # Credit accounts - one balance document per user
            await self.db.briefly_credit_accounts.create_index("user_id", unique=True)
            await self.db.briefly_credit_transactions.create_index([("user_id", 1), ("created_at", -1)])

            # Briefs - history per user, newest first
            await self.db.briefly_briefs.create_index("brief_id", unique=True)
            await self.db.briefly_briefs.create_index([("user_id", 1), ("created_at", -1)])
            logger.info("MongoDB indexes created/verified")
        except Exception as e:
            # Indexes may already exist with different options
            logger.warning(f"Index creation note: {e}")

# Global database instance
database = Database()
