import logging
import os

from routes import app

LOG_FORMAT = '%(asctime)s %(name)-12s %(levelname)-8s %(message)s'


def log_level(name):
    """Map a LOG_LEVEL value to a logging level, INFO when unrecognised."""
    level = logging.getLevelName((name or '').upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging():
    root = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    requested = os.getenv('LOG_LEVEL', 'INFO')
    root.setLevel(log_level(requested))
    if logging.getLevelName(requested.upper()) != root.level:
        root.warning("Unknown LOG_LEVEL %r, using INFO", requested)


@app.route('/', methods=['GET'])
def default_route():
    return 'Square Service'


configure_logging()

if __name__ == "__main__":
    host = os.getenv('HOST', '0.0.0.0')
    port = int(os.getenv('PORT', 8080))
    logging.info("Serving on %s:%s", host, port)
    # werkzeug exits with status 1 when the port is already bound
    app.run(host=host, port=port, debug=False)
