import logging
from sqlalchemy.orm import Session

from ..config import settings
from ..repository import Repository
from ..security import hash_password

logger = logging.getLogger(__name__)

DEMO_PROPERTIES = [
    {
        "title": "Modern Beach House",
        "description": "Beautiful beachfront property with stunning ocean views",
        "city": "Malibu, California",
        "price": 350,
        "rooms": 3,
        "bathrooms": 2,
        "area": 180,
        "has_wifi": True,
        "has_parking": True,
        "has_pool": True,
        "rating": 49,
        "image_url": "https://images.unsplash.com/photo-1512917774080-9991f1c4c750?auto=format&fit=crop&w=800&q=80",
    },
    {
        "title": "Luxury Apartment Downtown",
        "description": "Sophisticated city living with all amenities",
        "city": "New York, NY",
        "price": 275,
        "rooms": 2,
        "bathrooms": 2,
        "area": 95,
        "has_wifi": True,
        "has_parking": False,
        "has_pool": False,
        "rating": 47,
        "image_url": "https://images.unsplash.com/photo-1493809842364-78817add7ffb?auto=format&fit=crop&w=800&q=80",
    },
    {
        "title": "Cozy Mountain Cabin",
        "description": "Rustic retreat surrounded by nature",
        "city": "Aspen, Colorado",
        "price": 195,
        "rooms": 2,
        "bathrooms": 1,
        "area": 70,
        "has_wifi": False,
        "has_parking": True,
        "has_pool": False,
        "rating": 48,
        "image_url": "https://images.unsplash.com/photo-1480074568708-e7b720bb3f09?auto=format&fit=crop&w=800&q=80",
    },
]


def seed_demo_data(db: Session) -> int:
    """
    Give an empty store a demo host and a few listings to browse.
    Does nothing once any property exists. Returns the number of listings created.
    """
    repo = Repository(db)
    if repo.list_properties():
        return 0

    host = repo.get_user_by_login(settings.DEMO_HOST_LOGIN)
    if not host:
        host = repo.create_user(
            login=settings.DEMO_HOST_LOGIN,
            hashed_password=hash_password(settings.DEMO_HOST_PASSWORD),
            email=settings.DEMO_HOST_EMAIL,
            first_name="Demo",
            last_name="Host",
            phone_number="+10000000000",
            is_host=True,
        )
    for fields in DEMO_PROPERTIES:
        repo.create_property(host_id=host.id, **fields)
    logger.info("Seeded %d demo properties for host %s", len(DEMO_PROPERTIES), host.login)
    return len(DEMO_PROPERTIES)
