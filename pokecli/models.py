from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Base for every PokeAPI payload model (Internal Contract)
class APIModel(BaseModel):
    # Frozen: a decoded response is read-only.
    # Extra keys are ignored so new PokeAPI fields never break decoding.
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class NamedAPIResource(APIModel):
    name: str
    url: str


# --- Repeated relations ---

class PokemonAbility(APIModel):
    ability: NamedAPIResource
    is_hidden: bool
    slot: int


class VersionGameIndex(APIModel):
    game_index: int
    version: NamedAPIResource


class PokemonHeldItemVersion(APIModel):
    rarity: int
    version: NamedAPIResource


class PokemonHeldItem(APIModel):
    item: NamedAPIResource
    version_details: Tuple[PokemonHeldItemVersion, ...] = ()


class PokemonMoveVersion(APIModel):
    level_learned_at: int
    move_learn_method: NamedAPIResource
    version_group: NamedAPIResource
    order: Optional[int] = None


class PokemonMove(APIModel):
    move: NamedAPIResource
    version_group_details: Tuple[PokemonMoveVersion, ...] = ()


class PokemonStat(APIModel):
    base_stat: int
    effort: int
    stat: NamedAPIResource


class PokemonType(APIModel):
    slot: int
    type: NamedAPIResource


class PokemonCries(APIModel):
    latest: Optional[str] = None
    legacy: Optional[str] = None


# --- Sprites ---
# Every sprite is a URL or null; null and a missing key both read as None.

class FrontSprites(APIModel):
    front_default: Optional[str] = None
    front_female: Optional[str] = None


class FrontShinySprites(FrontSprites):
    front_shiny: Optional[str] = None
    front_shiny_female: Optional[str] = None


class FrontBackShinySprites(APIModel):
    back_default: Optional[str] = None
    back_shiny: Optional[str] = None
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None


class GraySprites(APIModel):
    back_default: Optional[str] = None
    back_gray: Optional[str] = None
    front_default: Optional[str] = None
    front_gray: Optional[str] = None
    back_transparent: Optional[str] = None
    front_transparent: Optional[str] = None


class GoldSilverSprites(FrontBackShinySprites):
    front_transparent: Optional[str] = None


class CrystalSprites(GoldSilverSprites):
    back_transparent: Optional[str] = None
    back_shiny_transparent: Optional[str] = None
    front_shiny_transparent: Optional[str] = None


class EmeraldSprites(APIModel):
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None


class GenderedSprites(FrontShinySprites):
    """Front and back sprites, each with default, female, shiny and shiny-female variants."""
    back_default: Optional[str] = None
    back_female: Optional[str] = None
    back_shiny: Optional[str] = None
    back_shiny_female: Optional[str] = None


class OfficialArtwork(APIModel):
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None

    def __str__(self) -> str:
        # Rendered as the container around the URL, e.g. "{https://...}"
        return "{%s}" % (self.front_default or "")


class OtherSprites(APIModel):
    dream_world: FrontSprites = FrontSprites()
    home: FrontShinySprites = FrontShinySprites()
    official_artwork: OfficialArtwork = Field(
        default=OfficialArtwork(), alias="official-artwork"
    )
    showdown: GenderedSprites = GenderedSprites()


class GenerationI(APIModel):
    red_blue: GraySprites = Field(default=GraySprites(), alias="red-blue")
    yellow: GraySprites = GraySprites()


class GenerationII(APIModel):
    crystal: CrystalSprites = CrystalSprites()
    gold: GoldSilverSprites = GoldSilverSprites()
    silver: GoldSilverSprites = GoldSilverSprites()


class GenerationIII(APIModel):
    emerald: EmeraldSprites = EmeraldSprites()
    firered_leafgreen: FrontBackShinySprites = Field(
        default=FrontBackShinySprites(), alias="firered-leafgreen"
    )
    ruby_sapphire: FrontBackShinySprites = Field(
        default=FrontBackShinySprites(), alias="ruby-sapphire"
    )


class GenerationIV(APIModel):
    diamond_pearl: GenderedSprites = Field(
        default=GenderedSprites(), alias="diamond-pearl"
    )
    heartgold_soulsilver: GenderedSprites = Field(
        default=GenderedSprites(), alias="heartgold-soulsilver"
    )
    platinum: GenderedSprites = GenderedSprites()


class BlackWhiteSprites(GenderedSprites):
    animated: GenderedSprites = GenderedSprites()


class GenerationV(APIModel):
    black_white: BlackWhiteSprites = Field(
        default=BlackWhiteSprites(), alias="black-white"
    )


class GenerationVI(APIModel):
    omegaruby_alphasapphire: FrontShinySprites = Field(
        default=FrontShinySprites(), alias="omegaruby-alphasapphire"
    )
    x_y: FrontShinySprites = Field(default=FrontShinySprites(), alias="x-y")


class GenerationVII(APIModel):
    icons: FrontSprites = FrontSprites()
    ultra_sun_ultra_moon: FrontShinySprites = Field(
        default=FrontShinySprites(), alias="ultra-sun-ultra-moon"
    )


class GenerationVIII(APIModel):
    icons: FrontSprites = FrontSprites()


class VersionSprites(APIModel):
    generation_i: GenerationI = Field(default=GenerationI(), alias="generation-i")
    generation_ii: GenerationII = Field(default=GenerationII(), alias="generation-ii")
    generation_iii: GenerationIII = Field(default=GenerationIII(), alias="generation-iii")
    generation_iv: GenerationIV = Field(default=GenerationIV(), alias="generation-iv")
    generation_v: GenerationV = Field(default=GenerationV(), alias="generation-v")
    generation_vi: GenerationVI = Field(default=GenerationVI(), alias="generation-vi")
    generation_vii: GenerationVII = Field(default=GenerationVII(), alias="generation-vii")
    generation_viii: GenerationVIII = Field(default=GenerationVIII(), alias="generation-viii")


class PokemonSprites(GenderedSprites):
    other: OtherSprites = OtherSprites()
    versions: VersionSprites = VersionSprites()


# Model for the raw /pokemon/{name} payload fetched from PokeAPI
class Pokemon(APIModel):
    id: int
    name: str
    order: int
    is_default: bool = True
    height: int = 0
    weight: int = 0
    base_experience: Optional[int] = None
    location_area_encounters: str = ""
    abilities: Tuple[PokemonAbility, ...] = ()
    forms: Tuple[NamedAPIResource, ...] = ()
    game_indices: Tuple[VersionGameIndex, ...] = ()
    held_items: Tuple[PokemonHeldItem, ...] = ()
    moves: Tuple[PokemonMove, ...] = ()
    stats: Tuple[PokemonStat, ...] = ()
    types: Tuple[PokemonType, ...] = ()
    # Variant-shaped legacy data, kept as raw JSON values
    past_types: Tuple[Any, ...] = ()
    past_abilities: Tuple[Any, ...] = ()
    species: Optional[NamedAPIResource] = None
    sprites: PokemonSprites = PokemonSprites()
    cries: Optional[PokemonCries] = None


# Model for the three fields shown to the user
class PokemonSummary(APIModel):
    name: str
    order: int
    artwork: OfficialArtwork

    @property
    def artwork_url(self) -> Optional[str]:
        return self.artwork.front_default
