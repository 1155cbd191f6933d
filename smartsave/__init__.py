"""SmartSave: compound-growth projections for periodic savings plans."""

from smartsave.config import APP_VERSION as __version__
