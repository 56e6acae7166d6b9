# wsgi.py
from loguru import logger

from bloggen import create_app

application = create_app()
app = application

if __name__ == "__main__":
    port = application.config["PORT"]
    logger.info("Blog Generator running at http://localhost:{}", port)
    application.run(host="0.0.0.0", port=port, debug=False)
