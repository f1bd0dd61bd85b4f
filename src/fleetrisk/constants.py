"""Scoring thresholds and display labels for fleet risk evaluation."""

from __future__ import annotations

# ── Core risk engine ─────────────────────────────────────────────────────────

# (exclusive lower bound km/h, score, reason kind), highest first
SPEED_BANDS: tuple[tuple[float, int, str], ...] = (
    (130, 4, "speedExtreme"),
    (110, 3, "speedHigh"),
    (95, 2, "speedAboveLimit"),
    (85, 1, "speedSlightlyElevated"),
)

# (exclusive lower bound in minutes since last position, score), highest first
STALENESS_BANDS: tuple[tuple[float, int], ...] = (
    (180, 3),
    (60, 2),
    (15, 1),
)
CRITICAL_STALENESS_MINUTES = 180

RISK_WARNING_THRESHOLD = 3
RISK_CRITICAL_THRESHOLD = 6

# Eco-driving events in the last 24h
ECO_EVENT_MANY_THRESHOLD = 2  # count above this adds ECO_EVENT_MANY_SCORE
ECO_EVENT_FEW_SCORE = 1
ECO_EVENT_MANY_SCORE = 2

# ── Weather ──────────────────────────────────────────────────────────────────

WEATHER_MAX_BUMP = 4
PRECIPITATION_LIGHT_MAX = 2.0
PRECIPITATION_MODERATE_MAX = 10.0
WIND_ELEVATED_MIN = 8.0
WIND_STRONG_ABOVE = 15.0
TEMPERATURE_FREEZING_BELOW = 0.0
TEMPERATURE_HEAT_ABOVE = 35.0
THUNDERSTORM_IDS = range(200, 300)
SNOW_IDS = range(600, 700)

WEATHER_REASONS: dict[str, str] = {
    "precipitation_heavy": "Heavy precipitation",
    "precipitation_moderate": "Moderate precipitation",
    "precipitation_light": "Light precipitation",
    "wind_strong": "Strong wind",
    "wind_elevated": "Elevated wind speed",
    "freezing": "Sub-zero temperature",
    "heat": "Extreme heat",
    "thunderstorm": "Thunderstorm",
    "snow": "Snow conditions",
}

# ── Fuel anomaly ─────────────────────────────────────────────────────────────

FUEL_CHANNEL = "FuelActualVolume"
SPEED_CHANNEL = "Speed"
FUEL_WINDOW_MINUTES = 90
ECO_WINDOW_MINUTES = 24 * 60
STATIONARY_SPEED_BELOW = 3.0
FUEL_DROP_HIGH_ABOVE = 5.0
FUEL_DROP_LOW_MIN = 3.0
FUEL_HIGH_MAX_DURATION_MINUTES = 10.0
FUEL_HIGH_RISK_IMPACT = 3
FUEL_LOW_RISK_IMPACT = 1
SIMULATED_DURATION_MINUTES = 5.0

FUEL_REASON_HIGH = "Úbytek paliva během stání"
FUEL_REASON_LOW = "Menší úbytek paliva během stání"

# ── Risk trend ───────────────────────────────────────────────────────────────

TREND_CRITICAL_OFFLINE_CUTOFF_MINUTES = 1440
TREND_CRITICAL_OFFLINE_SHIFT = 4
TREND_STALE_SHIFT = 1
TREND_SPEED_EXTREME_SHIFT = 2
TREND_ECO_MANY_SHIFT = 2
TREND_ECO_FEW_SHIFT = 1

TREND_DISPLAY: dict[str, dict[str, str]] = {
    "up": {"label": "Riziko roste", "emoji": "\U0001f53a", "color": "red"},
    "down": {"label": "Riziko klesá", "emoji": "\U0001f53b", "color": "green"},
    "stable": {"label": "Stabilní", "emoji": "➖", "color": "slate"},
}

# ── Action intelligence ──────────────────────────────────────────────────────

ACTION_OFFLINE_MINUTES = 360

ACTION_DISPLAY: dict[str, dict[str, str]] = {
    "immediate": {"label": "Okamžitě řešit", "badge_tone": "red", "dot_tone": "red"},
    "soon": {"label": "Vyžaduje pozornost", "badge_tone": "yellow", "dot_tone": "yellow"},
    "monitor": {"label": "Monitorovat", "badge_tone": "slate", "dot_tone": "slate"},
}

# ── Service estimate ─────────────────────────────────────────────────────────

SERVICE_INTERVAL_MIN = 10_000
SERVICE_INTERVAL_SPREAD = 10_000  # intervals fall in [10 000, 20 000)
SERVICE_CRITICAL_KM = 1000
SERVICE_WARNING_KM = 3000
MOCK_ODOMETER_MIN = 10_000
MOCK_ODOMETER_RANGE = 170_000  # mocks fall in [10 000, 180 000]

# ── Labels ───────────────────────────────────────────────────────────────────

RISK_LEVEL_LABELS: dict[str, str] = {
    "critical": "Kritické",
    "warning": "Varování",
    "ok": "V pořádku",
}

SERVICE_STATUS_LABELS: dict[str, str] = {
    "ok": "V pořádku",
    "warning": "Brzy servis",
    "critical": "Servis nutný",
}
