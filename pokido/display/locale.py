"""UI strings and catalog label translations for the supported locales."""

from typing import Dict, Optional, Tuple

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "he": {
        "appName": "Pokido",
        "loading": "טוען...",
        "error": "שגיאה",
        "welcomeSubtitle": "מכשיר זיהוי קלפי פוקימון",
        "scanCard": "סרוק קלף",
        "myAlbum": "האלבום שלי",
        "emptyAlbum": "האלבום ריק!",
        "scanFirst": "סרוק קלף ראשון",
        "noCardsInSet": "אין קלפים בסט זה",
        "savedToAlbum": "נשמר לאלבום!",
        "analyzing": "מנתח את הקלף...",
        "scanFailed": "הסריקה נכשלה",
        "hp": "HP",
        "set": "סט",
        "cards": "קלפים",
        "rarity": "נדירות",
        "estimatedValue": "ערך משוער",
        "tips": "💡 טיפים",
        "illustrator": "מאייר",
        "attacks": "⚔️ התקפות",
        "weakness": "חולשה",
        "retreat": "נסיגה",
        "poweredBy": "Powered by Gemini AI + TCGdex",
        "language": "שפה",
        "hebrew": "עברית",
        "english": "English",
        "cardDescription": "{name} - קלף פוקימון",
        "defaultRarity": "נפוץ",
        # Errors
        "errorGeneric": "אירעה שגיאה, נסה שוב",
        "errorConfiguration": "השירות אינו מוגדר כראוי",
        "errorInvalidInput": "קלט לא תקין",
        "errorNoFile": "לא הועלה קובץ",
        "errorFileTooLarge": "הקובץ גדול מדי",
        "errorNotAnImage": "הקובץ אינו תמונה תקינה",
        "errorNameRequired": "נדרש שם פוקימון",
        "errorNoPokemon": "לא זוהה שם פוקימון בתמונה",
        "errorNotFound": "הקלף לא נמצא",
        "errorUpstream": "שירות חיצוני אינו זמין, נסה שוב",
        "errorUnparsable": "לא ניתן לזהות את הקלף",
        "errorStorage": "שמירת האלבום נכשלה",
        # Tips
        "tipVeryRare": "💎 קלף נדיר מאוד! שמור במכסה מגן",
        "tipFutureValue": "📈 ערך עתידי גבוה",
        "tipHolo": "✨ קלף הולוגרפי - שמור בטוב",
        "tipCollectible": "💎 ערך אספני",
        "tipExpensive": "💰 קלף יקר! שמור במקום בטוח",
        "tipHighHp": "⚡ HP גבוה - קלף חזק במשחק!",
        "tipNiceCard": "📚 קלף נחמד לאוסף",
        "tipKeepSafe": "✨ שמור בתנאים טובים",
    },
    "en": {
        "appName": "Pokido",
        "loading": "Loading...",
        "error": "Error",
        "welcomeSubtitle": "Pokemon Card Scanner",
        "scanCard": "Scan Card",
        "myAlbum": "My Album",
        "emptyAlbum": "Album is empty!",
        "scanFirst": "Scan your first card",
        "noCardsInSet": "No cards in this set",
        "savedToAlbum": "Saved to album!",
        "analyzing": "Analyzing card...",
        "scanFailed": "Scan failed",
        "hp": "HP",
        "set": "Set",
        "cards": "cards",
        "rarity": "Rarity",
        "estimatedValue": "Estimated Value",
        "tips": "💡 Tips",
        "illustrator": "Illustrator",
        "attacks": "⚔️ Attacks",
        "weakness": "Weakness",
        "retreat": "Retreat",
        "poweredBy": "Powered by Gemini AI + TCGdex",
        "language": "Language",
        "hebrew": "עברית",
        "english": "English",
        "cardDescription": "{name} - Pokemon card",
        "defaultRarity": "Common",
        # Errors
        "errorGeneric": "Something went wrong, please try again",
        "errorConfiguration": "The service is not configured correctly",
        "errorInvalidInput": "Invalid input",
        "errorNoFile": "No file uploaded",
        "errorFileTooLarge": "File is too large",
        "errorNotAnImage": "The file is not a readable image",
        "errorNameRequired": "Pokemon name is required",
        "errorNoPokemon": "No Pokemon name was detected in the image",
        "errorNotFound": "Card not found",
        "errorUpstream": "An external service is unavailable, please try again",
        "errorUnparsable": "The card could not be identified",
        "errorStorage": "Saving the album failed",
        # Tips
        "tipVeryRare": "💎 Very rare card! Keep it in a protective case",
        "tipFutureValue": "📈 High future value",
        "tipHolo": "✨ Holographic card - store it well",
        "tipCollectible": "💎 Collectible value",
        "tipExpensive": "💰 Valuable card! Keep it somewhere safe",
        "tipHighHp": "⚡ High HP - a strong card in play!",
        "tipNiceCard": "📚 A nice card for the collection",
        "tipKeepSafe": "✨ Keep it in good condition",
    },
}

UNKNOWN_TYPE_COLOR = "#A8A878"

# type -> (Hebrew label, color)
TYPE_MAPPING: Dict[str, Tuple[str, str]] = {
    "water": ("מים", "#6890F0"),
    "fire": ("אש", "#F08030"),
    "grass": ("עשב", "#78C850"),
    "electric": ("חשמלי", "#F8D030"),
    "lightning": ("חשמלי", "#F8D030"),
    "psychic": ("פסיכי", "#F85888"),
    "fighting": ("לחימה", "#C03028"),
    "darkness": ("אופל", "#705848"),
    "metal": ("מתכת", "#B8B8D0"),
    "fairy": ("פיה", "#EE99AC"),
    "dragon": ("דרקון", "#7038F8"),
    "colorless": ("נטול צבע", "#A8A878"),
    "flying": ("מעופף", "#A890F0"),
    "poison": ("רעל", "#A040A0"),
    "ice": ("קרח", "#98D8D8"),
    "ground": ("קרקע", "#E0C068"),
    "rock": ("סלע", "#B8A038"),
    "bug": ("חרק", "#A8B820"),
    "ghost": ("רוח", "#705898"),
    "steel": ("פלדה", "#B8B8D0"),
    "dark": ("אופל", "#705848"),
}

RARITY_MAPPING: Dict[str, Dict[str, str]] = {
    "he": {
        "Common": "נפוץ",
        "Uncommon": "לא נפוץ",
        "Rare": "נדיר",
        "Rare Holo": "הולוגרפי נדיר",
        "Rare Ultra": "אולטרה נדיר",
        "Ultra Rare": "אולטרה נדיר",
        "Secret Rare": "סודי נדיר",
        "Promo": "פרומו",
        "Amazing Rare": "מדהים נדיר",
        "Shiny Rare": "מבריק נדיר",
        "Radiant Rare": "זוהר נדיר",
    },
    "en": {},
}


def t(key: str, locale: str = "he", **kwargs: str) -> str:
    """Translate a UI key; unknown keys come back unchanged."""
    text = TRANSLATIONS.get(locale, TRANSLATIONS["he"]).get(key, key)
    if kwargs:
        text = text.format(**kwargs)
    return text


def type_label(card_type: str, locale: str = "he") -> Tuple[str, Optional[str]]:
    """Label and color for a card type; unknown types pass through without a color."""
    mapped = TYPE_MAPPING.get(card_type.lower())
    if mapped is None:
        return card_type, None
    if locale == "he":
        return mapped
    return card_type.capitalize(), mapped[1]


def rarity_label(rarity: Optional[str], locale: str = "he") -> str:
    """Translated rarity; unknown rarities pass through unchanged."""
    if not rarity:
        return t("defaultRarity", locale)
    return RARITY_MAPPING.get(locale, {}).get(rarity, rarity)
