"""Reviews load test scenarios.

Readers browse the public feeds and the dashboard; writers submit reviews
and then re-fetch their own list, the way the UI revalidates after a
submit.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import mobile_review_data, product_review_data
from loadtests.helpers.state import ReviewerState


class ReviewReaderUser(HttpUser):
    """Anonymous visitor polling the public feed and the dashboard."""

    wait_time = between(1, 5)
    weight = 6

    @task(5)
    def all_reviews(self):
        self.client.get("/api/all-reviews", name="GET /api/all-reviews")

    @task(2)
    def mobile_reviews(self):
        self.client.get("/api/mobile-reviews", name="GET /api/mobile-reviews")

    @task(2)
    def dashboard_summary(self):
        self.client.get("/api/mobile-reviews/summary", name="GET /api/mobile-reviews/summary")


class SubmitAndRevalidateJourney(SequentialTaskSet):
    """Submit a product review -> re-fetch own reviews -> re-fetch the public feed."""

    def on_start(self):
        self.state = ReviewerState()

    @task
    def submit_review(self):
        with self.client.post(
            "/api/reviews",
            json=product_review_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/reviews",
        ) as resp:
            if resp.status_code == 201:
                self.state.review_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Submit review failed: {resp.status_code}")
                self.interrupt()

    @task
    def my_reviews(self):
        with self.client.get(
            "/api/reviews",
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/reviews",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List own reviews failed: {resp.status_code}")
            elif self.state.review_ids[-1] not in {r["id"] for r in resp.json()}:
                resp.failure("Submitted review missing from own reviews")

    @task
    def all_reviews(self):
        self.client.get("/api/all-reviews", name="GET /api/all-reviews")
        self.interrupt()


class ReviewWriterUser(HttpUser):
    wait_time = between(2, 8)
    weight = 2
    tasks = [SubmitAndRevalidateJourney]


class MobileShopUser(HttpUser):
    """Customer filling in the mobile-shop questionnaire, then viewing the dashboard."""

    wait_time = between(2, 8)
    weight = 1

    def on_start(self):
        self.state = ReviewerState()

    @task
    def submit_and_view_dashboard(self):
        with self.client.post(
            "/api/mobile-reviews",
            json=mobile_review_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/mobile-reviews",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Submit mobile review failed: {resp.status_code}")
                return
        self.client.get("/api/mobile-reviews/summary", name="GET /api/mobile-reviews/summary")
