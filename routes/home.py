# routes/home.py

from flask import Blueprint, render_template, current_app

home_bp = Blueprint('home', __name__)

@home_bp.route("/")
def index():
    # Entry point with links to the other pages.
    return render_template('home.hbs')

@home_bp.route("/about")
def about():
    return render_template('about.hbs', version=current_app.config.get("APP_VERSION"))
