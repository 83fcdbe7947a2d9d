"""Static venue and testimonial catalog."""

from __future__ import annotations

import copy
import functools
import uuid
from typing import TYPE_CHECKING, Any

from halisaha.match.models import MatchSubmission
from halisaha.match.services import MatchService

from .models import Testimonial, Venue

if TYPE_CHECKING:
    from halisaha.match.models import Match
    from halisaha.storage import Database

VENUE_IMAGE = "/assets/generated_images/venue_card_thumbnail_{}.png"
AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={}"

SEED_VENUES: list[dict[str, Any]] = [
    {
        "name": "Arena Spor Tesisleri",
        "location": "Kadıköy, İstanbul",
        "amenities": ["Parking", "Shower", "Cafe"],
        "available": 8,
    },
    {
        "name": "Şampiyon Halı Saha",
        "location": "Beşiktaş, İstanbul",
        "amenities": ["Parking", "WiFi"],
        "available": 5,
    },
    {
        "name": "Yıldız Sports Complex",
        "location": "Çankaya, Ankara",
        "amenities": ["Shower", "Cafe", "WiFi"],
        "available": 12,
    },
    {
        "name": "Futbol Park",
        "location": "Karşıyaka, İzmir",
        "amenities": ["Parking", "Shower"],
        "available": 6,
    },
    {
        "name": "Stadium Halı Saha",
        "location": "Çankaya, Ankara",
        "amenities": ["Parking", "Cafe", "WiFi"],
        "available": 10,
    },
    {
        "name": "Pro Football Center",
        "location": "Bornova, İzmir",
        "amenities": ["Shower", "WiFi", "Cafe"],
        "available": 7,
    },
]

# One listing per seed venue, in the same order.
SEED_MATCHES: list[dict[str, Any]] = [
    {
        "date": "28 Kasım",
        "time": "19:00",
        "maxPlayers": 12,
        "skillLevel": "Orta Seviye",
        "price": 50,
    },
    {
        "date": "29 Kasım",
        "time": "20:30",
        "maxPlayers": 14,
        "skillLevel": "İleri Seviye",
        "price": 60,
    },
    {
        "date": "30 Kasım",
        "time": "18:00",
        "maxPlayers": 10,
        "skillLevel": "Başlangıç",
        "price": 40,
    },
    {
        "date": "1 Aralık",
        "time": "17:30",
        "maxPlayers": 12,
        "skillLevel": "Orta Seviye",
        "price": 45,
    },
    {
        "date": "2 Aralık",
        "time": "21:00",
        "maxPlayers": 12,
        "skillLevel": "İleri Seviye",
        "price": 55,
    },
    {
        "date": "3 Aralık",
        "time": "19:30",
        "maxPlayers": 14,
        "skillLevel": "Orta Seviye",
        "price": 50,
    },
]

SEED_TESTIMONIALS: list[dict[str, Any]] = [
    {
        "name": "Mehmet Yılmaz",
        "quote": "Harika bir uygulama! Artık her hafta düzenli olarak maça "
        "katılıyorum. Yeni arkadaşlar edinmek için mükemmel bir platform.",
        "matchCount": 156,
        "seed": "Mehmet",
    },
    {
        "name": "Ayşe Demir",
        "quote": "Saha bulmak hiç bu kadar kolay olmamıştı. Arayüz çok "
        "kullanışlı ve sahalar gerçekten kaliteli.",
        "matchCount": 89,
        "seed": "Ayse",
    },
    {
        "name": "Burak Özkan",
        "quote": "İş çıkışı maç bulmak için ideal. Lokasyon filtreleme özelliği "
        "sayesinde yakınımdaki maçları kolayca buluyorum.",
        "matchCount": 203,
        "seed": "Burak",
    },
    {
        "name": "Zeynep Kara",
        "quote": "Hem eğlenceli hem de sağlıklı vakit geçirmek için harika bir "
        "fırsat. Topluluk çok arkadaş canlısı!",
        "matchCount": 127,
        "seed": "Zeynep",
    },
]


def _stable_id(kind: str, name: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"halisaha:{kind}:{name}"))


@functools.lru_cache(maxsize=None)
def _catalog() -> tuple[tuple[Venue, ...], tuple[Testimonial, ...]]:
    """Build the catalog once per process.

    IDs are derived from names so they stay the same across restarts.
    """
    venues = tuple(
        Venue(
            id=_stable_id("venue", v["name"]),
            name=v["name"],
            location=v["location"],
            imageUrl=VENUE_IMAGE.format(i),
            amenities=list(v["amenities"]),
            available=v["available"],
        )
        for i, v in enumerate(SEED_VENUES, start=1)
    )
    testimonials = tuple(
        Testimonial(
            id=_stable_id("testimonial", t["name"]),
            name=t["name"],
            quote=t["quote"],
            matchCount=t["matchCount"],
            avatarUrl=AVATAR_URL.format(t["seed"]),
        )
        for t in SEED_TESTIMONIALS
    )
    return venues, testimonials


class CatalogService:
    """Read access to the static catalog.

    Callers get their own copies; the cached catalog is never handed out.
    """

    @staticmethod
    def get_venues() -> list[Venue]:
        """Return every venue."""
        return copy.deepcopy(list(_catalog()[0]))

    @staticmethod
    def get_venue(venue_id: str) -> Venue | None:
        """Fetch a venue by its ID."""
        for venue in _catalog()[0]:
            if venue["id"] == venue_id:
                return copy.deepcopy(venue)
        return None

    @staticmethod
    def get_testimonials() -> list[Testimonial]:
        """Return every testimonial."""
        return copy.deepcopy(list(_catalog()[1]))

    @staticmethod
    def seed_matches(db: Database, organizer_id: str) -> list[Match]:
        """Create one open match per catalog venue."""
        created = []
        for venue, listing in zip(CatalogService.get_venues(), SEED_MATCHES):
            submission = MatchSubmission(
                venue_name=venue["name"],
                location=venue["location"],
                date=listing["date"],
                time=listing["time"],
                max_players=listing["maxPlayers"],
                skill_level=listing["skillLevel"],
                price=listing["price"],
                venue_id=venue["id"],
                image_url=venue["imageUrl"],
            )
            created.append(MatchService.create(db, submission, organizer_id))
        return created
