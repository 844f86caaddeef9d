from reviews.client.errors import extract_error_detail
from reviews.client.feed import FeedState, revalidate


class TestExtractErrorDetail:
    def test_domain_field_errors(self, make_response):
        response = make_response(400, {"error": {"stars": ["Rating must be between 1 and 5"]}})
        assert extract_error_detail(response, "fallback") == "stars: Rating must be between 1 and 5"

    def test_domain_error_string(self, make_response):
        response = make_response(400, {"error": "Something broke"})
        assert extract_error_detail(response, "fallback") == "Something broke"

    def test_request_validation_errors(self, make_response):
        response = make_response(
            422,
            {"detail": [{"loc": ["body", "productName"], "msg": "Field required", "type": "missing"}]},
        )
        assert extract_error_detail(response, "fallback") == "productName: Field required"

    def test_detail_string(self, make_response):
        response = make_response(401, {"detail": "Unauthorized"})
        assert extract_error_detail(response, "fallback") == "Unauthorized"

    def test_non_json_body(self, make_response):
        response = make_response(500, ValueError("not json"))
        assert extract_error_detail(response, "Failed to fetch reviews") == "Failed to fetch reviews"

    def test_unexpected_shape(self, make_response):
        response = make_response(500, ["oops"])
        assert extract_error_detail(response, "fallback") == "fallback"

    def test_detail_list_of_strings(self, make_response):
        response = make_response(400, {"detail": ["bad", "worse"]})
        assert extract_error_detail(response, "fallback") == "bad | worse"

    def test_detail_list_of_strings_reaches_feed_as_message(self, review_client, http_session, make_response):
        http_session.request.return_value = make_response(400, {"detail": ["bad"]})
        state = revalidate(FeedState(), review_client, now=1.0)
        assert state.error == "bad"
