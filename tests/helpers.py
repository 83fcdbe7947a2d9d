import tempfile
import unittest

from werkzeug.security import generate_password_hash

from halisaha import create_app
from halisaha.constants import PASSWORD_HASH_METHOD
from halisaha.match.models import MatchSubmission
from halisaha.match.services import MatchService
from halisaha.storage import get_db
from halisaha.user.services import UserService

TEST_PASSWORD = "secret1"  # nosec


class BaseTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

        self.app = create_app(
            {
                "TESTING": True,
                "SECRET_KEY": "test-secret",
                "DATA_DIR": self.tmp_dir.name,
            }
        )
        self.client = self.app.test_client()
        self.app_context = self.app.app_context()
        self.app_context.push()
        self.db = get_db()

    def tearDown(self):
        self.app_context.pop()

    def create_user(
        self,
        username="testuser",
        password=TEST_PASSWORD,
        full_name="Test User",
        phone="05551234567",
        position="Forvet",
    ):
        """Creates a user in storage and returns the user record."""
        return UserService.create(
            self.db,
            {
                "username": username,
                "password": generate_password_hash(
                    password, method=PASSWORD_HASH_METHOD
                ),
                "fullName": full_name,
                "phone": phone,
                "position": position,
            },
        )

    def create_match(self, organizer_id, **overrides):
        """Creates a match in storage and returns the match record."""
        fields = {
            "venue_name": "Arena Spor Tesisleri",
            "location": "Kadıköy, İstanbul",
            "date": "28 Kasım",
            "time": "19:00",
            "max_players": 10,
            "skill_level": "Orta Seviye",
            "price": 50,
            "required_positions": ["Kaleci", "Defans"],
        }
        fields.update(overrides)
        return MatchService.create(self.db, MatchSubmission(**fields), organizer_id)

    def login(self, username, password=TEST_PASSWORD, client=None):
        """Logs in through the API with the given (or default) test client."""
        client = client or self.client
        return client.post(
            "/api/giris", json={"username": username, "password": password}
        )

    def client_for(self, username, password=TEST_PASSWORD):
        """Returns a fresh test client logged in as ``username``."""
        client = self.app.test_client()
        response = self.login(username, password, client=client)
        self.assertEqual(response.status_code, 200)
        return client
