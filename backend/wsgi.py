import os
from prompt_studio import create_app

app = create_app(os.getenv("FLASK_CONFIG", "development"))
