"""
Main Routes
"""

from flask import render_template
from flask_login import current_user

from blognova.main import main_bp


@main_bp.route('/')
def home():
    """Landing page"""
    return render_template('main/home.html', curr_user=current_user)


@main_bp.route('/about')
def about():
    return render_template('main/about.html')


@main_bp.route('/contact')
def contact():
    return render_template('main/contact.html')


@main_bp.route('/privacy-policy')
def privacy_policy():
    return render_template('main/privacy.html')
