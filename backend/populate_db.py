import os
import random
import sys

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import SessionLocal, init_db
from models.category import Category, CategoryIcon, PREDEFINED_COLORS
from models.product import Product, ProductUnit

# Configuration
PRODUCTS_PER_CATEGORY = 8
RANDOM_SEED = 42
# End Configuration

DEMO_CATEGORIES = [
    ("Electronics", "Phones, screens and accessories", CategoryIcon.SMARTPHONE),
    ("Clothing", "Apparel for every season", CategoryIcon.SHIRT),
    ("Furniture", "Home and office furniture", CategoryIcon.SOFA),
    ("Books", "Printed and bound books", CategoryIcon.BOOK),
    ("Sports", "Fitness equipment", CategoryIcon.DUMBBELL),
    ("Kitchen", "Cookware and utensils", CategoryIcon.UTENSILS),
]


def populate():
    """Replaces catalog contents with demo categories and products."""
    rng = random.Random(RANDOM_SEED)
    init_db()
    session = SessionLocal()

    try:
        session.query(Product).delete()
        session.query(Category).delete()

        print(f"Inserting {len(DEMO_CATEGORIES)} categories...")
        categories = []
        for i, (name, description, icon) in enumerate(DEMO_CATEGORIES):
            category = Category(
                name=name,
                description=description,
                color=PREDEFINED_COLORS[i % len(PREDEFINED_COLORS)],
                icon=icon,
            )
            session.add(category)
            categories.append(category)
        session.flush()

        count = 0
        for category in categories:
            for n in range(1, PRODUCTS_PER_CATEGORY + 1):
                cost = round(rng.uniform(5.0, 400.0), 2)
                min_level = rng.choice([5, 10, 20])
                session.add(Product(
                    name=f"{category.name} Item {n:02d}",
                    sku=f"{category.name[:3].upper()}-{n:04d}",
                    description=f"Demo product in {category.name.lower()}.",
                    price=round(cost * rng.uniform(1.1, 1.8), 2),
                    cost_price=cost,
                    # Spread quantities so every stock status shows up
                    stock_quantity=rng.choice([0, min_level, rng.randint(min_level + 1, 900), 1000]),
                    min_stock_level=min_level,
                    max_stock_level=1000,
                    unit=rng.choice(list(ProductUnit)),
                    is_active=rng.random() > 0.1,
                    barcode=str(rng.randint(10**12, 10**13 - 1)),
                    weight=round(rng.uniform(0.1, 25.0), 2),
                    category_id=category.id,
                ))
                count += 1

        session.commit()
        print(f"Inserted {count} products.")
    except Exception as e:
        session.rollback()
        print(f"Seeding failed: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    populate()
