"""Create an administrator account, or reset the password of an existing one.

Usage: python scripts/make_admin.py admin@example.com [--password PASSWORD]
"""
import argparse
import getpass
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hertz_admin import create_app  # noqa: E402
from hertz_admin.extensions import db  # noqa: E402
from hertz_admin.storage import storage  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('email')
    parser.add_argument('--password', help='prompted for when omitted')
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass('Password: ')
    if not password:
        parser.error('password must not be empty')

    app = create_app()
    with app.app_context():
        admin = storage.get_admin_by_email(args.email)
        if admin is None:
            storage.create_admin({'email': args.email, 'password': password})
            print(f'New admin {args.email} created')
        else:
            admin.set_password(password)
            db.session.commit()
            print(f'Password reset for existing admin {args.email}')


if __name__ == '__main__':
    main()
