"""User-facing text for each supported display language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Language(IntEnum):
    """Display languages; the integer value is what settings storage keeps."""

    EN = 0
    ES = 1
    DE = 2
    FR = 3


@dataclass(frozen=True)
class LocalizedStrings:
    """Every piece of interface text for one language."""

    temp_placeholder: str
    feels_like_temp: str
    seven_day_forecast: str
    hourly_forecast: str
    today: str
    now: str
    am: str
    pm: str
    noon: str
    invalid_hour: str
    brightness: str
    location: str
    use_fahrenheit: str
    use_24hr: str
    save: str
    cancel: str
    close: str
    location_btn: str
    reset_wifi: str
    reset: str
    change_location: str
    aura_settings: str
    city: str
    search_results: str
    city_placeholder: str
    wifi_config: str
    reset_confirmation: str
    language_label: str
    weekdays: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.weekdays) != 7:
            raise ValueError("weekdays must name exactly seven days, starting with Sunday")


# Text that reads the same in every language.
_COMMON = {
    "temp_placeholder": "22°C",
    "use_fahrenheit": "°F",
    "use_24hr": "24H",
    "invalid_hour": "??",
}

# One column per language, in the order of Language's values: EN, ES, DE, FR.
_COLUMNS = {
    "feels_like_temp": ("Feels Like", "Se siente como", "Gefühlt wie", "Ressenti"),
    "seven_day_forecast": (
        "7 day forecast", "Pronóstico de 7 días", "7-Tage-Vorhersage", "Prévisions 7 jours",
    ),
    "hourly_forecast": (
        "Hourly forecast", "Pronóstico por horas", "Stündliche Vorhersage", "Prévisions horaires",
    ),
    "today": ("Today", "Hoy", "Heute", "Aujourd'hui"),
    "now": ("Now", "Ahora", "Jetzt", "Maintenant"),
    "am": ("AM", "AM", "", ""),
    "pm": ("PM", "PM", "", ""),
    "noon": ("12PM", "12PM", "12:00", "12:00"),
    "brightness": ("Brightness:", "Brillo:", "Helligkeit:", "Luminosité:"),
    "location": ("Location:", "Ubicación:", "Standort:", "Lieu:"),
    "save": ("Save", "Guardar", "Speichern", "Sauvegarder"),
    "cancel": ("Cancel", "Cancelar", "Abbrechen", "Annuler"),
    "close": ("Close", "Cerrar", "Schließen", "Fermer"),
    "location_btn": ("Change", "Cambiar", "Ändern", "Changer"),
    "reset_wifi": ("Reset WiFi", "Reiniciar WiFi", "WiFi zurücksetzen", "Reset WiFi"),
    "reset": ("Reset", "Reiniciar", "Zurücksetzen", "Reset"),
    "change_location": (
        "Change Location", "Cambiar Ubicación", "Standort ändern", "Changer lieu",
    ),
    "aura_settings": (
        "Aura Settings", "Configuración Aura", "Aura Einstellungen", "Paramètres Aura",
    ),
    "city": ("City:", "Ciudad:", "Stadt:", "Ville:"),
    "search_results": ("Search Results:", "Resultados:", "Suchergebnisse:", "Résultats:"),
    "city_placeholder": ("e.g. London", "ej. Madrid", "z.B. Berlin", "ex. Paris"),
    "wifi_config": (
        "Configuring WiFi...", "Configurando WiFi...", "WiFi konfigurieren...",
        "Configuration WiFi...",
    ),
    "reset_confirmation": (
        "Reset WiFi settings?", "¿Reiniciar configuración WiFi?",
        "WiFi-Einstellungen zurücksetzen?", "Reset paramètres WiFi?",
    ),
    "language_label": ("Language:", "Idioma:", "Sprache:", "Langue:"),
}

_WEEKDAYS = (
    "Sun Mon Tue Wed Thu Fri Sat",
    "Dom Lun Mar Mié Jue Vie Sáb",
    "So Mo Di Mi Do Fr Sa",
    "Dim Lun Mar Mer Jeu Ven Sam",
)


def _build(language: Language) -> LocalizedStrings:
    column = {name: values[language] for name, values in _COLUMNS.items()}
    return LocalizedStrings(
        **_COMMON,
        **column,
        weekdays=tuple(_WEEKDAYS[language].split()),
    )


_TABLE = {language: _build(language) for language in Language}


def strings_for(language: Union[Language, int]) -> LocalizedStrings:
    """Return the text for ``language``; anything unknown falls back to English."""
    try:
        return _TABLE[Language(language)]
    except (ValueError, TypeError):
        return _TABLE[Language.EN]