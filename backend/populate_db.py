import argparse
import os
import sys
from datetime import timedelta

# Add 'backend' folder to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

load_dotenv()

from config import settings
from crud import events as events_crud
from crud import news as news_crud
from crud import resources as resources_crud
from crud import users as users_crud
from crud.base import utcnow
from database import Store, init_db
from utils.tokenJWT import create_session_token

# Configuration
SAMPLE_EVENTS = [
    # (days from now, title, show time, sound check, location)
    (7, "Ensayo General", "19:00", None, "Sala de Ensayo"),
    (14, "Concierto en la Plaza", "20:00", "18:00", "Plaza Central"),
    (30, "Fiesta Patronal", "22:00", "20:30", "Parque Municipal"),
]
SAMPLE_RESOURCES = [
    ("Repertorio 2026", "document", "https://example.com/repertorio.pdf"),
    ("Ensayo grabado", "audio", "https://example.com/ensayo.mp3"),
]
# End Configuration


def load_all_data(owner_open_id: str):
    """Seed the owner account and a small demo dataset."""
    init_db()
    factory = Store.get_session_factory()
    if factory is None:
        print("DATABASE_URL no está configurado; no hay dónde sembrar datos.")
        return
    session = factory()
    try:
        users_crud.upsert_user(session, owner_open_id, name="Director", login_method="manual", role="admin")
        owner = users_crud.get_user_by_open_id(session, owner_open_id)

        if not events_crud.get_all_events(session):
            now = utcnow().replace(minute=0, second=0, microsecond=0)
            for days, title, show_time, sound_check, location in SAMPLE_EVENTS:
                events_crud.create_event(session, {
                    "title": title,
                    "date": now + timedelta(days=days),
                    "show_time": show_time,
                    "sound_check_time": sound_check,
                    "location": location,
                })
            print(f"Creados {len(SAMPLE_EVENTS)} eventos de ejemplo")

        if not news_crud.get_all_news(session):
            news_crud.create_news(session, {
                "title": "Bienvenidos",
                "content": "Aquí encontrarán los avisos de la banda.",
                "is_urgent": 0,
                "created_by": owner.id,
            })

        if not resources_crud.get_all_resources(session):
            for title, kind, url in SAMPLE_RESOURCES:
                resources_crud.create_resource(session, {
                    "title": title, "type": kind, "url": url, "created_by": owner.id,
                })

        token = create_session_token(
            owner.open_id, name=owner.name, login_method=owner.login_method,
            user_id=owner.id, role=owner.role,
        )
        print(f"Token de sesión para {owner.open_id}:\n{token}")
    finally:
        session.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the band manager database")
    parser.add_argument("--owner", default=settings.OWNER_OPEN_ID or "owner", help="Identity token of the owner admin")
    args = parser.parse_args()
    load_all_data(args.owner)
