import os
from app import create_app

# Entry point for `flask run` and `python app.py`; FLASK_CONFIG picks the config class
app = create_app(os.environ.get('FLASK_CONFIG', 'default'))

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), port=int(os.environ.get('PORT', '5000')))
