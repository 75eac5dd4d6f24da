import os

from src.staff_manager.staff_manager.main import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "3001")), debug=app.config["DEBUG"])
