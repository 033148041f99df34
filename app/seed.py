# app/seed.py
"""
Built-in sample content inserted on first start.

Each table is checked on its own: only empty tables are filled. No
transaction wraps the loop, so a crash mid-seed leaves a partially
filled table that will not be topped up on the next start.
"""
import logging

from app.repositories.storage import Storage
from app.schemas.blog import BlogInsert
from app.schemas.product import ProductInsert
from app.schemas.testimonial import TestimonialInsert

logger = logging.getLogger(__name__)

SEED_CATEGORIES = ["Regular", "Seasonal"]

SEED_PRODUCTS = [
    {
        "name": "Premium Saffron Threads",
        "description": "Hand-harvested, Grade A saffron threads perfect for culinary excellence. Sourced directly from our partner farms.",
        "category": "Seasonal",
        "image_url": "/images/product-spice.png",
        "price": None,
    },
    {
        "name": "Golden Wheat Grains",
        "description": "High-protein golden wheat grains, cleaned and processed for international export standards.",
        "category": "Regular",
        "image_url": "/images/product-grain.png",
        "price": None,
    },
    {
        "name": "Organic Cardamom Pods",
        "description": "Large, green, aromatic cardamom pods selected for their intense fragrance and flavor profile.",
        "category": "Regular",
        "image_url": "/images/product-spice.png",
        "price": None,
    },
    {
        "name": "Royal Basmati Rice",
        "description": "Extra long grain aged basmati rice, renowned for its delicate aroma and non-sticky texture.",
        "category": "Regular",
        "image_url": "/images/product-grain.png",
        "price": None,
    },
    {
        "name": "Seasonal Alphonso Mangoes",
        "description": "The king of mangoes, available only during peak season. Sweet, rich, and exported via air freight.",
        "category": "Seasonal",
        "image_url": "/images/hero-bg.png",
        "price": None,
    },
    {
        "name": "Export Quality Cashews",
        "description": "Whole W180 grade cashew nuts, processed to maintain crunch and natural sweetness.",
        "category": "Regular",
        "image_url": "/images/product-grain.png",
        "price": None,
    },
]

SEED_BLOGS = [
    {
        "title": "The Future of Sustainable Spice Export",
        "content": "Sustainability is at the core of our operations. We are implementing new biodegradable packaging solutions that reduce environmental impact while maintaining the freshness and quality of our premium spices. Our fair-trade partnerships ensure that farmers receive equitable compensation, fostering long-term stability in the global supply chain.",
        "image_url": "/images/product-spice.png",
        "author": "GOODWILL GLOBAL EXPORTS",
    },
    {
        "title": "Global Grain Market Trends 2025",
        "content": "The global demand for ancient grains like quinoa, millet, and amaranth is soaring. Consumers in North America and Europe are increasingly seeking nutrient-dense, gluten-free alternatives to traditional wheat. GOODWILL GLOBAL EXPORTS is expanding its network of organic certified farms to meet this growing international demand.",
        "image_url": "/images/product-grain.png",
        "author": "Market Analyst",
    },
]

SEED_TESTIMONIALS = [
    {
        "name": "Elena Rossi",
        "role": "Procurement Manager, Italia Foods",
        "content": "The quality of saffron we receive is consistently exceptional. Their attention to packaging ensures the aroma is perfectly preserved during transit. A truly reliable partner for premium ingredients.",
        "image_url": "/images/product-spice.png",
    },
    {
        "name": "David Chen",
        "role": "Director, Asian Rice Importers",
        "content": "We have been sourcing Basmati rice for three years now. The grain length and purity are unmatched in the market. Their logistical efficiency makes international trade seamless.",
        "image_url": "/images/product-grain.png",
    },
    {
        "name": "Sarah Williams",
        "role": "Head Chef, The Organic Kitchen",
        "content": "As a chef, I demand the best. The seasonal mangoes from Goodwill Exports were the highlight of our summer menu. Fresh, sweet, and delivered right on time.",
        "image_url": "/images/hero-bg.png",
    },
]


def seed_storage(storage: Storage) -> dict[str, int]:
    """
    Fill every empty table with its sample rows.

    Returns the number of rows inserted per table.
    """
    inserted = {"categories": 0, "products": 0, "blogs": 0, "testimonials": 0}

    if not storage.list_categories():
        for name in SEED_CATEGORIES:
            storage.create_category(name)
            inserted["categories"] += 1

    if not storage.list_products():
        for item in SEED_PRODUCTS:
            data = dict(item)
            category = storage.create_category(data.pop("category"))
            storage.create_product(ProductInsert(**data, category_id=category.id))
            inserted["products"] += 1

    if not storage.list_blogs():
        for item in SEED_BLOGS:
            storage.create_blog(BlogInsert(**item))
            inserted["blogs"] += 1

    if not storage.list_testimonials():
        for item in SEED_TESTIMONIALS:
            storage.create_testimonial(TestimonialInsert(**item))
            inserted["testimonials"] += 1

    for table, count in inserted.items():
        if count:
            logger.info("Seeded %d %s", count, table)

    return inserted
