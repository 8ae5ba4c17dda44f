"""HexaShop — Seed a dev user plus sample posts and products (idempotent)."""
import asyncio

from sqlalchemy import func, select

from hexashop.config import get_settings
from hexashop.core.security import get_password_hash
from hexashop.db.session import async_session_maker, create_tables
from hexashop.models import PostEntity, ProductEntity, UserEntity

settings = get_settings()

DEV_USERNAME = "admin"

SAMPLE_POSTS = [
    ("My First Blog Post", "This is the content of my first blog post."),
    ("Hexagonal architecture", "Controllers call use cases, use cases call ports."),
    ("Pagination notes", "limit=-1 returns every row."),
]

SAMPLE_PRODUCTS = [
    ("Widget", 30.0, "A very ordinary widget"),
    ("Gadget", 10.0, "Cheaper than a widget"),
    ("Gizmo", 20.0, None),
]


async def seed():
    await create_tables()

    async with async_session_maker() as db:
        result = await db.execute(select(UserEntity).where(UserEntity.username == DEV_USERNAME))
        if result.scalar_one_or_none():
            print("Dev user already exists. Skipping seed.")
            return

        db.add(
            UserEntity(
                username=DEV_USERNAME,
                email="admin@hexashop.local",
                password=get_password_hash(settings.DEFAULT_PASSWORD),
            )
        )

        post_count = (await db.execute(select(func.count()).select_from(PostEntity))).scalar_one()
        if not post_count:
            db.add_all(PostEntity(title=title, body=body) for title, body in SAMPLE_POSTS)

        product_count = (await db.execute(select(func.count()).select_from(ProductEntity))).scalar_one()
        if not product_count:
            db.add_all(
                ProductEntity(name=name, price=price, description=description)
                for name, price, description in SAMPLE_PRODUCTS
            )

        await db.commit()
        print(f"Seeded user {DEV_USERNAME!r} (password from DEFAULT_PASSWORD), sample posts and products")


if __name__ == "__main__":
    asyncio.run(seed())
