import argparse
import logging
from datetime import date

from binbot.config import Config, ReminderSettings
from binbot.services.reminders import send_bin_reminder


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check tomorrow's bin and send the notification.")
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="Pretend today is this date (YYYY-MM-DD).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = ReminderSettings.from_config(Config)
    result = send_bin_reminder(settings, today=args.date or date.today())

    if result.error:
        print("❌ Error sent:", result.error)
    elif result.sent:
        print("✅ Sent:", result.message)
    else:
        print("No bin due tomorrow, nothing sent.")


if __name__ == "__main__":
    main()
