"""Tests for the match HTTP routes."""

import unittest
from unittest.mock import patch

from halisaha.errors import PersistenceError
from halisaha.match.services import MatchService
from halisaha.match.visibility import PUBLIC_FIELDS
from halisaha.user.services import UserService

from tests.helpers import BaseTestCase

NEW_MATCH = {
    "venueName": "Yıldız Sports Complex",
    "location": "Çankaya, Ankara",
    "date": "30 Kasım",
    "time": "18:00",
    "maxPlayers": 10,
    "skillLevel": "Başlangıç",
    "price": 40,
    "requiredPositions": ["Kaleci", "Forvet"],
}


class CreateMatchTestCase(BaseTestCase):
    def setUp(self):
        super().setUp()
        self.organizer = self.create_user("organizer", phone="05320000000")
        self.organizer_client = self.client_for("organizer")

    def _create(self, **overrides):
        payload = dict(NEW_MATCH)
        payload.update(overrides)
        return self.organizer_client.post("/api/maclar", json=payload)

    def test_create_requires_login(self):
        for url in ("/api/maclar", "/api/matches"):
            response = self.client.post(url, json=NEW_MATCH)
            self.assertEqual(response.status_code, 401)
        self.assertEqual(self.db.matches.load_all(), [])

    def test_create(self):
        response = self._create()
        self.assertEqual(response.status_code, 201)

        data = response.get_json()
        self.assertEqual(data["message"], "Maç ilanı başarıyla oluşturuldu!")
        match = data["match"]
        self.assertEqual(match["organizerId"], self.organizer["id"])
        self.assertEqual(match["participantIds"], [])
        self.assertEqual(match["currentPlayers"], 1)
        self.assertEqual(match["requiredPositions"], ["Kaleci", "Forvet"])
        self.assertEqual(match["feedback"], [])

        self.assertEqual(len(self.db.matches.load_all()), 1)

    def test_create_through_english_route(self):
        response = self.organizer_client.post("/api/matches", json=NEW_MATCH)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(len(self.db.matches.load_all()), 1)

    def test_create_normalises_choices(self):
        response = self._create(
            skillLevel="başlangıç", requiredPositions=["kaleci", "Kaleci", "DEFANS"]
        )
        self.assertEqual(response.status_code, 201)
        match = response.get_json()["match"]
        self.assertEqual(match["skillLevel"], "Başlangıç")
        self.assertEqual(match["requiredPositions"], ["Kaleci", "Defans"])

    def test_create_accepts_whole_floats(self):
        response = self._create(maxPlayers=12.0, price=50.0)
        self.assertEqual(response.status_code, 201)
        stored = self.db.matches.load_all()[0]
        self.assertEqual(stored["maxPlayers"], 12)
        self.assertIsInstance(stored["maxPlayers"], int)
        self.assertEqual(stored["price"], 50)

    def test_create_without_positions(self):
        payload = dict(NEW_MATCH)
        del payload["requiredPositions"]
        response = self.organizer_client.post("/api/maclar", json=payload)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.get_json()["match"]["requiredPositions"], [])

    def test_create_validation(self):
        cases = [
            ({"venueName": ""}, "Tüm alanları doldurunuz"),
            ({"maxPlayers": 1}, "Oyuncu sayısı en az 2 olmalıdır"),
            ({"price": -5}, "Fiyat 0 veya daha büyük olmalıdır"),
            ({"skillLevel": "Profesyonel"}, "Geçersiz seviye"),
            ({"requiredPositions": ["Libero"]}, "Geçersiz mevki"),
            ({"maxPlayers": 10.9}, "Oyuncu sayısı tam sayı olmalıdır"),
            ({"maxPlayers": True}, "Oyuncu sayısı tam sayı olmalıdır"),
            ({"maxPlayers": "on"}, "Oyuncu sayısı tam sayı olmalıdır"),
            ({"price": 49.99}, "Fiyat tam sayı olmalıdır"),
            ({"price": False}, "Fiyat tam sayı olmalıdır"),
        ]
        for overrides, message in cases:
            with self.subTest(overrides=overrides):
                response = self._create(**overrides)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json(), {"error": message})
        self.assertEqual(self.db.matches.load_all(), [])


class MatchRoutesTestCase(BaseTestCase):
    def setUp(self):
        super().setUp()
        self.organizer = self.create_user("organizer", phone="05320000000")
        self.player = self.create_user("player")
        self.match = self.create_match(self.organizer["id"])
        self.other = self.create_match(
            self.organizer["id"],
            venue_name="Futbol Park",
            location="Karşıyaka, İzmir",
            date="1 Aralık",
            skill_level="İleri Seviye",
            required_positions=["Forvet"],
        )
        self.player_client = self.client_for("player")
        self.organizer_client = self.client_for("organizer")

    def _url(self, suffix=""):
        return f"/api/maclar/{self.match['id']}{suffix}"

    def test_list_for_guest(self):
        response = self.client.get("/api/maclar")
        self.assertEqual(response.status_code, 200)
        matches = response.get_json()
        self.assertEqual([m["id"] for m in matches], [self.match["id"], self.other["id"]])
        for match in matches:
            self.assertEqual(set(match), set(PUBLIC_FIELDS))

    def _listed(self, url, **params):
        response = self.client.get(url, query_string=params)
        self.assertEqual(response.status_code, 200)
        return [m["id"] for m in response.get_json()]

    def test_list_filters_turkish_params(self):
        self.assertEqual(
            self._listed("/api/maclar", konum="karşıyaka", tarih="Aralık"),
            [self.other["id"]],
        )
        self.assertEqual(
            self._listed("/api/maclar", mevki="kaleci"), [self.match["id"]]
        )
        self.assertEqual(
            self._listed("/api/maclar", seviye="orta seviye"), [self.match["id"]]
        )

    def test_list_filters_english_params(self):
        self.assertEqual(
            self._listed("/api/matches", location="Karşıyaka", position="forvet"),
            [self.other["id"]],
        )
        self.assertEqual(
            self._listed("/api/matches", skillLevel="Orta Seviye", date="Kas"),
            [self.match["id"]],
        )

    def test_vocabularies_do_not_mix(self):
        """Each route reads only its own parameter names."""
        self.assertEqual(len(self._listed("/api/maclar", location="Karşıyaka")), 2)
        self.assertEqual(len(self._listed("/api/matches", konum="Karşıyaka")), 2)

    def test_blank_filters_are_ignored(self):
        self.assertEqual(
            len(self._listed("/api/maclar", konum="", mevki=" ", tarih="")), 2
        )

    def test_view_match(self):
        guest = self.client.get(self._url()).get_json()
        self.assertNotIn("participantIds", guest)

        organizer = self.organizer_client.get(self._url()).get_json()
        self.assertEqual(organizer["organizerId"], self.organizer["id"])
        self.assertNotIn("organizerPhone", organizer)

        self.player_client.post(self._url("/katil"))
        participant = self.player_client.get(
            f"/api/matches/{self.match['id']}"
        ).get_json()
        self.assertEqual(participant["organizerPhone"], "05320000000")

    def test_view_unknown_match(self):
        response = self.client.get("/api/maclar/yok")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Maç bulunamadı"})

    def test_join(self):
        response = self.player_client.post(self._url("/katil"))
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["message"], "Maça katıldınız")
        self.assertEqual(data["match"]["participantIds"], [self.player["id"]])
        self.assertEqual(data["match"]["currentPlayers"], 2)
        self.assertEqual(data["match"]["organizerPhone"], "05320000000")

        again = self.player_client.post(self._url("/katil")).get_json()
        self.assertEqual(again["match"]["currentPlayers"], 2)

    def test_join_requires_login(self):
        response = self.client.post(self._url("/katil"))
        self.assertEqual(response.status_code, 401)
        stored = MatchService.get_by_id(self.db, self.match["id"])
        self.assertEqual(stored["participantIds"], [])

    def test_join_unknown_match(self):
        response = self.player_client.post("/api/maclar/yok/katil")
        self.assertEqual(response.status_code, 404)

    def test_leave(self):
        self.player_client.post(self._url("/katil"))
        response = self.player_client.post(self._url("/ayril"))
        self.assertEqual(response.status_code, 200)

        data = response.get_json()
        self.assertEqual(data["message"], "Maçtan ayrıldınız")
        self.assertEqual(data["reliabilityScore"], 90)
        self.assertEqual(data["match"]["currentPlayers"], 1)
        # No longer a participant, so only the listing fields come back.
        self.assertNotIn("participantIds", data["match"])

        again = self.player_client.post(self._url("/ayril")).get_json()
        self.assertEqual(again["reliabilityScore"], 80)

        profile = self.player_client.get("/api/profil").get_json()
        self.assertEqual(profile["reliabilityScore"], 80)

    def test_leave_is_undone_when_penalty_cannot_be_saved(self):
        self.player_client.post(self._url("/katil"))
        before = self.db.matches.path.read_bytes()

        with patch.object(
            self.db.users, "save_all", side_effect=PersistenceError()
        ):
            with self.assertLogs(self.app.logger, level="ERROR"):
                response = self.player_client.post(self._url("/ayril"))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "Kayıt işlemi başarısız oldu"})
        self.assertEqual(self.db.matches.path.read_bytes(), before)
        stored = MatchService.get_by_id(self.db, self.match["id"])
        self.assertEqual(stored["participantIds"], [self.player["id"]])
        self.assertEqual(stored["currentPlayers"], 2)
        user = UserService.get_by_id(self.db, self.player["id"])
        self.assertEqual(user["reliabilityScore"], 100)

    def test_leave_unknown_match(self):
        response = self.player_client.post("/api/maclar/yok/ayril")
        self.assertEqual(response.status_code, 404)
        user = UserService.get_by_id(self.db, self.player["id"])
        self.assertEqual(user["reliabilityScore"], 100)

    def test_feedback(self):
        response = self.player_client.post(
            self._url("/geri-bildirim"), json={"comment": "Çok iyi maç", "rating": 5}
        )
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["message"], "Geri bildiriminiz kaydedildi")

        stored = MatchService.get_by_id(self.db, self.match["id"])
        self.assertEqual(
            stored["feedback"],
            [{"userId": self.player["id"], "comment": "Çok iyi maç", "rating": 5}],
        )

    def test_feedback_validation(self):
        cases = [
            ({"comment": "iyi", "rating": 6}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "iyi", "rating": 0}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "iyi"}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "iyi", "rating": 4.7}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "iyi", "rating": 2.5}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "iyi", "rating": True}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "iyi", "rating": "dört"}, "Puan 1 ile 5 arasında olmalıdır"),
            ({"comment": "   ", "rating": 3}, "Yorum gereklidir"),
        ]
        for payload, message in cases:
            with self.subTest(payload=payload):
                response = self.player_client.post(
                    self._url("/geri-bildirim"), json=payload
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json(), {"error": message})

        stored = MatchService.get_by_id(self.db, self.match["id"])
        self.assertEqual(stored["feedback"], [])

    def test_feedback_unknown_match(self):
        response = self.player_client.post(
            "/api/maclar/yok/geri-bildirim", json={"comment": "iyi", "rating": 4}
        )
        self.assertEqual(response.status_code, 404)

    def test_my_matches(self):
        foreign = self.create_match(self.player["id"], venue_name="Pro Football Center")
        self.organizer_client.post(f"/api/maclar/{foreign['id']}/katil")

        response = self.organizer_client.get("/api/maclarim")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(
            [m["id"] for m in data["organizing"]], [self.match["id"], self.other["id"]]
        )
        self.assertEqual([m["id"] for m in data["joined"]], [foreign["id"]])
        self.assertEqual(data["joined"][0]["organizerPhone"], "05551234567")

    def test_my_matches_requires_login(self):
        self.assertEqual(self.client.get("/api/maclarim").status_code, 401)


if __name__ == "__main__":
    unittest.main()
