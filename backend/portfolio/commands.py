import click
from flask import current_app

from portfolio.extensions import db
from portfolio.seed import seed_content


def register_commands(app):
    @app.cli.command("seed")
    @click.option("--admin-email", default="admin@example.com", show_default=True)
    @click.option("--admin-password", default="admin123", show_default=True)
    @click.option("--create-tables/--no-create-tables", default=True, show_default=True,
                  help="Create missing tables before seeding.")
    def seed(admin_email, admin_password, create_tables):
        """Replace site content with demo data and ensure an admin user."""
        if create_tables:
            db.create_all()

        seed_content(admin_email=admin_email, admin_password=admin_password)
        current_app.logger.info("Seed completed")
        click.echo("Seed completed")
