import atexit

from dotenv import load_dotenv
from memevote import create_app
load_dotenv()

application = create_app()

# Release pooled DB connections on shutdown
atexit.register(application.extensions["vote_store"].close)

if __name__ == "__main__":
    application.run()
