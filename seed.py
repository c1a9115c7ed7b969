import logging
from helper_arcade import create_app, db
from helper_arcade.catalog.seed import seed_helpers

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

app = create_app()

with app.app_context():
    db.create_all()
    count = seed_helpers()
    print(f"✅ Seeded {count} helpers.")
