# routes/language.py

from flask import Blueprint, session, request, redirect, url_for, current_app

language_bp = Blueprint('language', __name__)

@language_bp.route('/change-language/<lang_code>')
def change_language(lang_code):
    # only store languages we actually offer
    if lang_code in current_app.config.get('LANGUAGES', ['en']):
        session['lang'] = lang_code
    # send the user back to wherever they came from
    return redirect(request.referrer or url_for('devices.dashboard'))
