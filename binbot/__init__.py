from datetime import date

import click
from flask import Flask

from binbot.config import Config, ReminderSettings


def create_app(config_overrides: dict | None = None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    from binbot.routes.cron import cron_bp

    app.register_blueprint(cron_bp)

    @app.cli.command("send-reminder")
    @click.option("--date", "on_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
                  help="Pretend today is this date (YYYY-MM-DD).")
    def send_reminder_command(on_date):
        """Check tomorrow's bin and send the notification."""
        from binbot.services.reminders import send_bin_reminder

        settings = ReminderSettings.from_config(app.config)
        today = on_date.date() if on_date else date.today()
        result = send_bin_reminder(settings, today=today)

        if result.error:
            click.echo(f"Error sent: {result.error}")
        elif result.sent:
            click.echo(f"Sent: {result.message}")
        else:
            click.echo("No bin due tomorrow, nothing sent.")

    return app
