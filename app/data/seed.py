# app/data/seed.py
from decimal import Decimal

from app.data.store import Store

CATALOG = [
    ("Laptop", "999.99", "High-performance laptop"),
    ("Wireless Mouse", "29.99", "Ergonomic wireless mouse"),
    ("USB-C Cable", "14.99", "Durable USB-C charging cable"),
    ("Mechanical Keyboard", "129.99", "RGB mechanical keyboard"),
    ("4K Monitor", "399.99", "Ultra HD 4K display"),
    ("Headphones", "199.99", "Noise-cancelling headphones"),
    ("Phone Stand", "19.99", "Adjustable phone stand"),
    ("Webcam", "79.99", "1080p HD webcam"),
]


def seed(store: Store):
    # only seed if empty
    if store.items.list_items():
        return
    for name, price, description in CATALOG:
        store.items.create_item(name=name, price=Decimal(price), description=description)
