"""Resource registry and the entity models decoded from it.

Entity models are loose: every field is optional and unknown fields are kept.
Which fields are present depends on set_fields().
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict

from igdb_query.images import Image


class Entity(BaseModel):
    """Base entity model"""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None


class Game(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None
    storyline: Optional[str] = None
    created_at: Optional[int] = None  # Unix time
    updated_at: Optional[int] = None  # Unix time
    first_release_date: Optional[int] = None  # Unix time
    hypes: Optional[int] = None
    popularity: Optional[float] = None
    rating: Optional[float] = None
    rating_count: Optional[int] = None
    total_rating: Optional[float] = None
    total_rating_count: Optional[int] = None
    cover: Optional[int] = None
    collection: Optional[int] = None
    franchise: Optional[int] = None
    genres: Optional[List[int]] = None
    themes: Optional[List[int]] = None
    platforms: Optional[List[int]] = None
    game_modes: Optional[List[int]] = None
    screenshots: Optional[List[int]] = None


class Company(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    country: Optional[int] = None  # ISO 3166-1 numeric code
    logo: Optional[int] = None
    parent: Optional[int] = None
    developed: Optional[List[int]] = None
    published: Optional[List[int]] = None
    start_date: Optional[int] = None  # Unix time


class Person(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    country: Optional[int] = None
    games: Optional[List[int]] = None
    mug_shot: Optional[int] = None


class Review(Entity):
    title: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    game: Optional[int] = None
    user: Optional[int] = None
    introduction: Optional[str] = None
    content: Optional[str] = None
    conclusion: Optional[str] = None
    positive_points: Optional[str] = None
    negative_points: Optional[str] = None
    likes: Optional[int] = None
    views: Optional[int] = None
    created_at: Optional[int] = None


class Character(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    species: Optional[int] = None
    gender: Optional[int] = None
    games: Optional[List[int]] = None
    mug_shot: Optional[int] = None
    created_at: Optional[int] = None


class Platform(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    abbreviation: Optional[str] = None
    generation: Optional[int] = None
    platform_logo: Optional[int] = None


class Genre(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None


class Theme(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None


class Franchise(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    games: Optional[List[int]] = None


class Collection(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    games: Optional[List[int]] = None


class GameEngine(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    companies: Optional[List[int]] = None
    platforms: Optional[List[int]] = None


class ImageEntity(Image):
    """Stored image that is also an addressable entity"""

    id: Optional[int] = None


class Cover(ImageEntity):
    game: Optional[int] = None


class Artwork(ImageEntity):
    game: Optional[int] = None


class Screenshot(ImageEntity):
    game: Optional[int] = None


class CompanyLogo(ImageEntity):
    pass


class CharacterMugshot(ImageEntity):
    pass


class GameList(Entity):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    user: Optional[int] = None
    entries: Optional[List[int]] = None
    public: Optional[bool] = None


class UsageReport(BaseModel):
    model_config = ConfigDict(extra="allow")

    metric: Optional[str] = None
    period: Optional[str] = None
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    max_value: Optional[int] = None
    current_value: Optional[int] = None


class ApiStatus(BaseModel):
    """Usage report for the configured credentials"""

    model_config = ConfigDict(extra="allow")

    authorized: Optional[bool] = None
    plan: Optional[str] = None
    usage_reports: Optional[UsageReport] = None


@dataclass(frozen=True)
class Resource:
    """
    A named category of entity exposed by the API.

    Attributes:
        name: Attribute name on Client, e.g. ``games``
        path: Path below the API root, e.g. ``games``
        model: Entity model responses decode into
        requires_token: True if requests need an access token
    """

    name: str
    path: str
    model: Type[BaseModel]
    requires_token: bool = False


STATUS_PATH = "api_status"

RESOURCES: Dict[str, Resource] = {
    r.name: r
    for r in (
        Resource("games", "games", Game),
        Resource("companies", "companies", Company),
        Resource("people", "people", Person),
        Resource("reviews", "reviews", Review),
        Resource("characters", "characters", Character),
        Resource("platforms", "platforms", Platform),
        Resource("genres", "genres", Genre),
        Resource("themes", "themes", Theme),
        Resource("franchises", "franchises", Franchise),
        Resource("collections", "collections", Collection),
        Resource("game_engines", "game_engines", GameEngine),
        Resource("covers", "covers", Cover),
        Resource("artworks", "artworks", Artwork),
        Resource("screenshots", "screenshots", Screenshot),
        Resource("company_logos", "company_logos", CompanyLogo),
        Resource("character_mug_shots", "character_mug_shots", CharacterMugshot),
        Resource("lists", "lists", GameList, requires_token=True),
    )
}
