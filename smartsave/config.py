"""
Default application settings.

Loaded by create_app() through ``app.config.from_object``; any key can be
overridden from the environment with the ``SMARTSAVE_`` prefix, e.g.
``SMARTSAVE_LOG_LEVEL=DEBUG`` or ``SMARTSAVE_RATE_PRESETS='[5, 8, 12]'``.
"""

APP_VERSION = "0.1.0"


class DefaultConfig:
    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL = "INFO"

    # ── CORS (dev frontends) ─────────────────────────────────────────
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # ── Rate presets offered as quick-pick chips (annual %, ascending) ─
    RATE_PRESETS = [4.0, 7.0, 10.0, 12.0]

    # ── Theme persistence ────────────────────────────────────────────
    THEME_COOKIE = "smartsave-theme"
    THEME_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # one year

    # ── Report ───────────────────────────────────────────────────────
    REPORT_FILENAME = "SmartSave-Savings-Report.pdf"
