import logging
from typing import Any, Dict, Optional

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

import enrollment_settings as settings
from enrollment import enrollment_bp
from enrollment_store import EnrollmentStore

# ---------------- Logging ----------------
logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger("enrollment-app")


# ---------------- App factory ----------------
def create_app(store: Optional[EnrollmentStore] = None,
               config: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(
        APP_ENV=settings.APP_ENV,
        TRUST_PROXY=settings.TRUST_PROXY,
        ENROLLMENT_PROGRAMS=settings.PROGRAMS,
        ENROLLMENT_MODALITIES=settings.MODALITIES,
    )
    if config:
        app.config.update(config)
    app.config["ENROLLMENT_STORE"] = store if store is not None else EnrollmentStore()

    app.register_blueprint(enrollment_bp)

    # Behind a reverse proxy, trust its scheme/host headers
    if app.config["TRUST_PROXY"]:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    return app


app = create_app()

# ---------------------------------------------------------------
if __name__ == "__main__":
    log.info("Listening on %s", settings.PORT)
    app.run(host="0.0.0.0", port=settings.PORT, debug=False)
