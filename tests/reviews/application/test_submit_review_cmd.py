"""Application tests for the SubmitReview command handler."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from reviews.review.review import Review, ReviewForm
from reviews.review.submission import SubmitReview


def _submit_review(**overrides):
    defaults = {
        "product_name": "Pixel 8 case",
        "stars": 4,
        "description": "Snug fit, buttons still easy to press.",
        "bought_from_url": "https://shop.example.com/pixel-8-case",
        "user_id": "user-001",
        "user_name": "Sam Doe",
        "user_email": "sam@example.com",
    }
    defaults.update(overrides)
    return current_domain.process(SubmitReview(**defaults), asynchronous=False)


class TestSubmitReviewCommand:
    def test_submit_persists_review(self):
        review_id = _submit_review()
        review = current_domain.repository_for(Review).get(review_id)
        assert review.form == ReviewForm.PRODUCT.value
        assert review.product_name == "Pixel 8 case"
        assert review.stars.score == 4
        assert review.bought_from_url == "https://shop.example.com/pixel-8-case"

    def test_submit_records_submitter(self):
        review_id = _submit_review()
        review = current_domain.repository_for(Review).get(review_id)
        assert str(review.user_id) == "user-001"
        assert review.user_name == "Sam Doe"
        assert review.user_email == "sam@example.com"

    def test_submit_returns_review_id(self):
        review_id = _submit_review()
        assert isinstance(review_id, str)
        assert review_id

    def test_submit_sets_timestamps(self):
        review_id = _submit_review()
        review = current_domain.repository_for(Review).get(review_id)
        assert review.created_at is not None
        assert review.updated_at == review.created_at

    def test_optional_fields_may_be_omitted(self):
        review_id = _submit_review(description=None, bought_from_url=None, image_url=None)
        review = current_domain.repository_for(Review).get(review_id)
        assert review.description is None
        assert review.image_url is None

    def test_same_user_may_review_same_product_twice(self):
        first = _submit_review(product_name="Charger")
        second = _submit_review(product_name="Charger")
        assert first != second


class TestSubmitReviewValidation:
    def test_missing_product_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(SubmitReview(stars=4), asynchronous=False)
        assert "product_name" in exc.value.messages

    def test_missing_stars_rejected(self):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(SubmitReview(product_name="Charger"), asynchronous=False)
        assert "stars" in exc.value.messages

    @pytest.mark.parametrize("stars", [0, 6])
    def test_out_of_range_stars_rejected(self, stars):
        with pytest.raises(ValidationError) as exc:
            _submit_review(stars=stars)
        assert "stars" in exc.value.messages

    def test_non_http_url_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _submit_review(image_url="ftp://files.example.com/photo.jpg")
        assert "image_url" in exc.value.messages

    def test_rejected_review_not_persisted(self):
        with pytest.raises(ValidationError):
            _submit_review(stars=9)
        assert current_domain.repository_for(Review)._dao.query.all().total == 0
