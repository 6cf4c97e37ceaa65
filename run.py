#!/usr/bin/env python3
"""
Local development server (``python run.py``); production runs wsgi.py under gunicorn.
"""
import os

import click

from allwayscalc import create_app

app = create_app()


def main():
    env = app.config.get('ENV', 'development')
    allow_in_production = os.environ.get('ALLOW_DEV_SERVER_IN_PRODUCTION', '').lower() in {'1', 'true', 'yes', 'on'}
    if env == 'production' and not allow_in_production:
        raise click.ClickException(
            "Refusing to start the Flask dev server while FLASK_ENV=production. "
            "Use `gunicorn -c gunicorn.conf.py wsgi:app` instead."
        )

    debug = env != 'production' and os.environ.get('FLASK_DEBUG', '1').lower() not in {'0', 'false', 'no', 'off'}
    app.run(
        host=os.environ.get('HOST', '0.0.0.0'),
        port=int(os.environ.get('PORT', 5000)),
        debug=debug,
        use_reloader=debug,
    )


if __name__ == '__main__':
    try:
        main()
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code)
