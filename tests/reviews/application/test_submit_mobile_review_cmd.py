"""Application tests for the SubmitMobileReview command handler."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from reviews.review.review import Review, ReviewForm
from reviews.review.submission import SubmitMobileReview


def _submit_mobile_review(**overrides):
    defaults = {
        "product_name": "Galaxy S23 screen repair",
        "stars": 5,
        "product_type": "Repair Service",
        "product_quality": "Excellent",
        "service_quality": "Good",
        "would_recommend": True,
        "customer_name": "Ana",
        "mobile_number": "+44 7700 900123",
        "user_id": "user-002",
    }
    defaults.update(overrides)
    return current_domain.process(SubmitMobileReview(**defaults), asynchronous=False)


class TestSubmitMobileReviewCommand:
    def test_submit_persists_questionnaire(self):
        review_id = _submit_mobile_review()
        review = current_domain.repository_for(Review).get(review_id)
        assert review.form == ReviewForm.MOBILE.value
        assert review.product_type == "Repair Service"
        assert review.product_quality == "Excellent"
        assert review.service_quality == "Good"
        assert review.would_recommend is True

    def test_submit_persists_contact_details(self):
        review_id = _submit_mobile_review()
        review = current_domain.repository_for(Review).get(review_id)
        assert review.customer_name == "Ana"
        assert review.mobile_number == "+44 7700 900123"

    def test_not_recommending_is_an_answer(self):
        review_id = _submit_mobile_review(would_recommend=False)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.would_recommend is False

    def test_product_type_is_free_text(self):
        review_id = _submit_mobile_review(product_type="Smartwatch")
        review = current_domain.repository_for(Review).get(review_id)
        assert review.product_type == "Smartwatch"


class TestSubmitMobileReviewValidation:
    def test_missing_quality_rejected(self):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                SubmitMobileReview(
                    product_name="Charger",
                    stars=3,
                    product_type="Accessories",
                    service_quality="Good",
                    would_recommend=True,
                ),
                asynchronous=False,
            )
        assert "product_quality" in exc.value.messages

    def test_unanswered_recommendation_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _submit_mobile_review(would_recommend=None)
        assert "would_recommend" in exc.value.messages

    def test_unknown_quality_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _submit_mobile_review(service_quality="Superb")
        assert "service_quality" in exc.value.messages

    def test_invalid_mobile_number_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _submit_mobile_review(mobile_number="call me")
        assert "mobile_number" in exc.value.messages
