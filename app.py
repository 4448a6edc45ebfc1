# app.py

import os
os.environ.setdefault("FLASK_APP", __name__)

# Flask
from flask import Flask
from flask import session, request, current_app
from jinja2 import select_autoescape

from extensions import db, babel

from dotenv import load_dotenv
load_dotenv()

# Import Models
from models.device_type import DeviceType
from models.device_name import DeviceName

# Import Blueprints
from routes.home import home_bp
from routes.devices import devices_bp
from routes.language import language_bp
from routes.api import api_bp

# Import Configurations
from config.settings import Config

# Import Repository
from controllers.device_repository import SqlDeviceRepository, EXTENSION_KEY

def get_locale():
    # 1) if they’ve set it in session, use that
    if 'lang' in session:
        return session['lang']
    # 2) otherwise auto-detect from the Accept-Language header
    return request.accept_languages.best_match(current_app.config['LANGUAGES'])

def create_app(config_object=None, repository=None):
    app = Flask(
        __name__,
        template_folder="views",
        static_folder="public",
        static_url_path="/assets"   # now public/ ↔ /assets
    )
    app.config.from_object(Config)
    if isinstance(config_object, dict):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    # Templates use the .hbs extension, escape them like .html
    app.jinja_env.autoescape = select_autoescape(["html", "hbs"])

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Bind database
    db.init_app(app)

    with app.app_context():
        db.create_all()

    # One repository per process, handed to every request
    app.extensions[EXTENSION_KEY] = repository or SqlDeviceRepository(db)

    # Initialize Babel *with* your selector
    babel.init_app(app,
                   locale_selector=get_locale,
                   default_locale='en',
                   default_timezone='UTC')
    @app.context_processor
    def inject_locale():
        return {'current_locale': session.get('lang', 'en')}

    # Register template context
    @app.context_processor
    def inject_translation():
        from flask_babel import gettext as t
        return dict(t=t, app_version=app.config.get("APP_VERSION"))

    # Register Blueprints
    app.register_blueprint(home_bp)
    app.register_blueprint(devices_bp)
    app.register_blueprint(language_bp)
    app.register_blueprint(api_bp)

    app.logger.info("Device manager ready (db=%s)", app.config["SQLALCHEMY_DATABASE_URI"].split("@")[-1])
    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
