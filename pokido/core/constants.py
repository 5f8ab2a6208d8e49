from typing import Final, Tuple

# External services
GEMINI_BASE: Final[str] = "https://generativelanguage.googleapis.com/v1beta/models"
TCGDEX_BASE: Final[str] = "https://api.tcgdex.net/v2"
TCGDEX_ASSETS: Final[str] = "https://assets.tcgdex.net"
POKEMON_TCG_BASE: Final[str] = "https://api.pokemontcg.io/v2/cards"

# Vision request
VISION_TEMPERATURE: Final[float] = 0.1
VISION_MAX_OUTPUT_TOKENS: Final[int] = 256
VISION_JPEG_QUALITY: Final[int] = 90
VISION_PROMPT: Final[str] = """Analyze this Pokemon card image and extract:
1. Pokemon name (exact name, e.g., "Pikachu", "Charizard", "Mew")
2. Card number if visible (e.g., "25/102")
3. Set name if visible
4. Language of the card text ("english", "japanese" or "other")

Return ONLY a JSON object in this exact format:
{
  "pokemonName": "PokemonName",
  "cardNumber": "XX/YY",
  "setName": "Set Name",
  "language": "english"
}

If any field is not found, use null."""

# Catalog matching
HIGH_RES_SUFFIX: Final[str] = "/high.png"
IMAGE_FALLBACK_PAGE_SIZE: Final[int] = 5

# Album storage
COLLECTION_KEY: Final[str] = "pokido-collection"
LANGUAGE_KEY: Final[str] = "pokido-language"
UNKNOWN_SET_ID: Final[str] = "unknown"
UNKNOWN_SET_NAME: Final[str] = "Unknown Set"

# Requests
MAX_UPLOAD_BYTES: Final[int] = 15 * 1024 * 1024
SUPPORTED_LOCALES: Final[Tuple[str, ...]] = ("he", "en")

# Display thresholds
HIGH_VALUE_THRESHOLD: Final[int] = 50
HIGH_HP_THRESHOLD: Final[int] = 200
MIN_DISPLAY_VALUE: Final[int] = 10
