import unittest
from unittest.mock import patch, MagicMock
import os
import sys

import requests

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from travel_admin.services.place_validator import (
    is_non_india_country,
    is_place_in_india,
    validate_places_in_india,
)


def _response(payload=None, status_code=200):
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.reason = "OK" if response.ok else "Internal Server Error"
    response.json.return_value = payload
    return response


def _search(title, snippet):
    return _response({"query": {"search": [{"title": title, "snippet": snippet}]}})


def _page(title, extract, coordinates=None):
    page = {"pageid": 1, "title": title, "extract": extract}
    if coordinates is not None:
        page["coordinates"] = [{"lat": coordinates[0], "lon": coordinates[1]}]
    return _response({"query": {"pages": {"1": page}}})


def _session(responses):
    """Fake Wikipedia session keyed by ("search", query) / ("page", title)."""
    session = MagicMock()

    def get(url, params):
        if params.get("list") == "search":
            result = responses[("search", params["srsearch"])]
        else:
            result = responses[("page", params["titles"])]
        if isinstance(result, Exception):
            raise result
        return result

    session.get.side_effect = get
    return session


WIKIPEDIA = {
    ("search", "Mumbai"): _search(
        "Mumbai",
        'Mumbai is the capital city of the <span class="searchmatch">Indian</span> state of Maharashtra',
    ),
    ("search", "London"): _search("London", "London is the capital and largest city of England"),
    ("page", "London"): _page(
        "London", "London is the capital and largest city of England and the United Kingdom."
    ),
    ("search", "Goa"): _search("Goa", "Goa is a state on the southwestern coast of India"),
}


class TestDenylist(unittest.TestCase):

    def test_exact_and_partial_matches(self):
        self.assertTrue(is_non_india_country("France"))
        self.assertTrue(is_non_india_country("  United States of America "))
        self.assertTrue(is_non_india_country("Paris, France"))
        # contained by a denylist entry
        self.assertTrue(is_non_india_country("states"))
        self.assertFalse(is_non_india_country("Jaipur"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_denylisted_names_make_no_request(self, mock_get_session):
        for name in ["France", "USA", "uk", "Sri Lanka", "Tokyo, Japan"]:
            self.assertFalse(is_place_in_india(name))
        mock_get_session.assert_not_called()

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_blank_name_rejected(self, mock_get_session):
        self.assertFalse(is_place_in_india("   "))
        self.assertFalse(is_place_in_india(""))
        mock_get_session.assert_not_called()


class TestIsPlaceInIndia(unittest.TestCase):

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_snippet_mentioning_india_accepts_without_page_fetch(self, mock_get_session):
        session = _session(WIKIPEDIA)
        mock_get_session.return_value = session

        self.assertTrue(is_place_in_india("Mumbai"))
        self.assertEqual(session.get.call_count, 1)

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_diaspora_snippet_does_not_shortcut(self, mock_get_session):
        session = _session({
            ("search", "Edison"): _search(
                "Edison, New Jersey",
                "Edison is a township with a large Indian American community",
            ),
            ("page", "Edison, New Jersey"): _page(
                "Edison, New Jersey", "Edison is a township located in the United States."
            ),
        })
        mock_get_session.return_value = session

        self.assertFalse(is_place_in_india("Edison"))
        # the page had to be fetched, the snippet alone was not enough
        self.assertEqual(session.get.call_count, 2)

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_diaspora_page_text_does_not_accept_on_demonym(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Oak Tree Road"): _search(
                "Oak Tree Road", "Oak Tree Road is known for its Indian American businesses"
            ),
            ("page", "Oak Tree Road"): _page(
                "Oak Tree Road",
                "Oak Tree Road is a street known for its Indian American businesses.",
                coordinates=(40.57, -74.35),
            ),
        })

        self.assertFalse(is_place_in_india("Oak Tree Road"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_coordinates_inside_bounding_box_accept(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Hampi"): _search("Hampi", "Hampi is a UNESCO World Heritage Site"),
            ("page", "Hampi"): _page(
                "Hampi",
                "Hampi is a UNESCO World Heritage Site with ruins of an ancient capital.",
                coordinates=(15.335, 76.46),
            ),
        })

        self.assertTrue(is_place_in_india("Hampi"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_coordinates_on_box_edge_accept(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Edge Point"): _search("Edge Point", "A survey marker"),
            ("page", "Edge Point"): _page("Edge Point", "A survey marker.", coordinates=(6.5, 68.1)),
        })

        self.assertTrue(is_place_in_india("Edge Point"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_coordinates_outside_bounding_box_reject(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Machu Picchu"): _search("Machu Picchu", "Machu Picchu is a 15th-century citadel"),
            ("page", "Machu Picchu"): _page(
                "Machu Picchu",
                "Machu Picchu is a 15th-century Inca citadel.",
                coordinates=(-13.16, -72.54),
            ),
        })

        self.assertFalse(is_place_in_india("Machu Picchu"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_capital_and_largest_city_of_other_country_reject(self, mock_get_session):
        # both sets of coordinates fall inside India's bounding box
        mock_get_session.return_value = _session({
            ("search", "Kathmandu"): _search("Kathmandu", "Kathmandu is a valley city"),
            ("page", "Kathmandu"): _page(
                "Kathmandu", "Kathmandu is the capital of Nepal.", coordinates=(27.7, 85.3)
            ),
            ("search", "Dhaka"): _search("Dhaka", "Dhaka is a river port"),
            ("page", "Dhaka"): _page(
                "Dhaka",
                "Dhaka is the capital and largest city in the Bangladesh delta region.",
                coordinates=(23.8, 90.4),
            ),
        })

        self.assertFalse(is_place_in_india("Kathmandu"))
        self.assertFalse(is_place_in_india("Dhaka"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_text_placing_page_in_other_country_beats_coordinates(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Kandy"): _search("Kandy", "Kandy is a major city"),
            ("page", "Kandy"): _page(
                "Kandy",
                "Kandy is a major city located in Sri Lanka.",
                coordinates=(7.29, 80.63),
            ),
        })

        self.assertFalse(is_place_in_india("Kandy"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_indicator_phrase_accepts(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Munnar"): _search("Munnar", "Munnar is a hill station"),
            ("page", "Munnar"): _page("Munnar", "Munnar is a town in the Western Ghats mountain range."),
        })

        self.assertTrue(is_place_in_india("Munnar"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_no_evidence_rejects(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Zzyzx"): _search("Zzyzx", "Zzyzx is an unincorporated community"),
            ("page", "Zzyzx"): _page("Zzyzx", "Zzyzx is an unincorporated community."),
        })

        self.assertFalse(is_place_in_india("Zzyzx"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_search_title_in_denylist_rejects(self, mock_get_session):
        session = _session({("search", "Gaul"): _search("France", "France is a country")})
        mock_get_session.return_value = session

        self.assertFalse(is_place_in_india("Gaul"))
        self.assertEqual(session.get.call_count, 1)

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_search_failure_rejects(self, mock_get_session):
        session = _session({("search", "Mumbai"): _response(None, status_code=503)})
        mock_get_session.return_value = session

        self.assertFalse(is_place_in_india("Mumbai"))
        self.assertEqual(session.get.call_count, 1)

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_no_search_results_rejects(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Qwertyuiop"): _response({"query": {"search": []}}),
        })

        self.assertFalse(is_place_in_india("Qwertyuiop"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_page_fetch_failure_falls_back_to_snippet(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Zzyzx"): _search("Zzyzx", "Zzyzx is an unincorporated community"),
            ("page", "Zzyzx"): _response(None, status_code=500),
        })

        self.assertFalse(is_place_in_india("Zzyzx"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_page_fetch_failure_accepts_snippet_mentioning_india(self, mock_get_session):
        session = _session({
            ("search", "Edison"): _search(
                "Edison, New Jersey",
                "Edison is a township with a large Indian American community",
            ),
            ("page", "Edison, New Jersey"): _response(None, status_code=500),
        })
        mock_get_session.return_value = session

        # the diaspora qualifier skips the shortcut, the fallback only looks for the name
        self.assertTrue(is_place_in_india("Edison"))
        self.assertEqual(session.get.call_count, 2)

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_network_error_rejects(self, mock_get_session):
        mock_get_session.return_value = _session({
            ("search", "Mumbai"): requests.ConnectionError("connection reset"),
        })

        self.assertFalse(is_place_in_india("Mumbai"))

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_malformed_json_rejects(self, mock_get_session):
        broken = _response()
        broken.json.side_effect = ValueError("Expecting value")
        mock_get_session.return_value = _session({("search", "Mumbai"): broken})

        self.assertFalse(is_place_in_india("Mumbai"))


class TestValidatePlacesInIndia(unittest.TestCase):

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_mixed_string_reports_foreign_place(self, mock_get_session):
        mock_get_session.return_value = _session(WIKIPEDIA)

        result = validate_places_in_india("Mumbai, London")

        self.assertFalse(result.valid)
        self.assertEqual(result.invalid_places, ["London"])
        self.assertEqual(result.message, "Please provide places within India")
        self.assertEqual(
            result.to_dict(),
            {
                "valid": False,
                "invalidPlaces": ["London"],
                "message": "Please provide places within India",
            },
        )

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_all_places_valid(self, mock_get_session):
        mock_get_session.return_value = _session(WIKIPEDIA)

        result = validate_places_in_india([" Mumbai ", "Goa", ""])

        self.assertTrue(result.valid)
        self.assertEqual(result.invalid_places, [])
        self.assertEqual(result.to_dict(), {"valid": True, "invalidPlaces": []})

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_empty_input_makes_no_request(self, mock_get_session):
        for empty in ["", [], " , ,", ["  "]]:
            result = validate_places_in_india(empty)
            self.assertFalse(result.valid)
            self.assertEqual(result.invalid_places, [])
            self.assertEqual(result.message, "No places provided")
        mock_get_session.assert_not_called()

    @patch('travel_admin.services.place_validator.get_wikipedia_session')
    def test_network_error_only_invalidates_that_place(self, mock_get_session):
        responses = dict(WIKIPEDIA)
        responses[("search", "Pune")] = requests.Timeout("read timed out")
        mock_get_session.return_value = _session(responses)

        result = validate_places_in_india(["Mumbai", "Pune", "Goa"])

        self.assertFalse(result.valid)
        self.assertEqual(result.invalid_places, ["Pune"])

    @patch('travel_admin.services.place_validator.is_place_in_india')
    def test_unexpected_error_returns_generic_message(self, mock_is_place_in_india):
        mock_is_place_in_india.side_effect = RuntimeError("boom")

        result = validate_places_in_india("Mumbai")

        self.assertFalse(result.valid)
        self.assertEqual(result.invalid_places, [])
        self.assertEqual(result.message, "Error validating places. Please try again.")


if __name__ == '__main__':
    unittest.main()
