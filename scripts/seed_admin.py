"""
Seed script to create the administrator account.

Reads ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_NAME from the environment / .env.

Run with: python -m scripts.seed_admin
"""
import asyncio
import logging
import sys

from estate_listings.config import settings
from estate_listings.database import async_session_maker, init_db, close_db
from estate_listings.exceptions import ValidationError
from estate_listings.services.auth import AuthService

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


async def create_admin_user() -> int:
    """Create the admin user if it does not exist yet"""
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.error("ADMIN_EMAIL and ADMIN_PASSWORD must be set")
        return 1

    await init_db()
    try:
        async with async_session_maker() as session:
            auth_service = AuthService(session)

            existing_user = await auth_service.get_user_by_email(settings.ADMIN_EMAIL)
            if existing_user:
                print(f"\n{'='*50}")
                print("Admin user already exists!")
                print(f"{'='*50}")
                print(f"Email: {existing_user.email}")
                print(f"{'='*50}\n")
                return 0

            try:
                user = await auth_service.create_admin(
                    email=settings.ADMIN_EMAIL,
                    password=settings.ADMIN_PASSWORD,
                    name=settings.ADMIN_NAME,
                )
            except ValidationError as e:
                logger.error(f"{e.message}: {e.details.get('errors', [])}")
                return 1

            print(f"\n{'='*50}")
            print("Admin user created successfully!")
            print(f"{'='*50}")
            print(f"Email: {user.email}")
            print(f"Role: {user.role}")
            print(f"{'='*50}\n")
            return 0
    finally:
        await close_db()


if __name__ == "__main__":
    sys.exit(asyncio.run(create_admin_user()))
