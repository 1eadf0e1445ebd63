"""Report whether the configured database is reachable."""
import sys
sys.path.insert(0, '.')
from shopfront import create_app
from shopfront.database import check_connection
from shopfront.errors import ConnectionFailure

try:
    app = create_app()
    with app.app_context():
        check_connection()
except ConnectionFailure as e:
    print('database unreachable:', e.__cause__ or e)
    sys.exit(1)

print('database ok')
