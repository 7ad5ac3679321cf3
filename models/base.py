"""
Database Base Module

Creates the SQLAlchemy instance shared by the Label and Recipe models.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py via db.init_app()
db = SQLAlchemy()
