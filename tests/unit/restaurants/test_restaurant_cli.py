"""Tests for the restaurant and payment CLI commands."""

from crudyrestaurants.restaurants.cli import DEFAULT_PAYMENT_TYPES, SAMPLE_RESTAURANTS


class TestRestaurantCommands:
    def test_list_empty(self, runner):
        result = runner.invoke(args=["restaurant", "list"])

        assert result.exit_code == 0
        assert "No restaurants found." in result.output

    def test_list(self, runner, sample_restaurant):
        result = runner.invoke(args=["restaurant", "list"])

        assert result.exit_code == 0
        assert "Supreme Eats (Denver, CO)" in result.output
        assert "menus=2" in result.output
        assert "payments=Cash" in result.output
        assert "Total: 1 restaurant(s)" in result.output

    def test_seed(self, runner, service):
        result = runner.invoke(args=["restaurant", "seed"])

        assert result.exit_code == 0, result.output
        assert f"Seeded {len(SAMPLE_RESTAURANTS)} restaurant(s)" in result.output
        assert [p.type for p in service.list_payments()] == list(DEFAULT_PAYMENT_TYPES)

        apple = service.get_by_name("Apple")
        assert apple.menu_count == 5
        assert [p.type for p in apple.payments] == ["Credit Card", "Cash"]
        assert [r.name for r in service.search_by_dish("tacos")] == ["Apple", "Eagle Cafe"]

    def test_seed_twice_skips_existing(self, runner, service):
        runner.invoke(args=["restaurant", "seed"])

        result = runner.invoke(args=["restaurant", "seed"])

        assert result.exit_code == 0
        assert "Skipping Apple: already exists" in result.output
        assert "Seeded 0 restaurant(s)" in result.output
        assert len(service.list()) == len(SAMPLE_RESTAURANTS)
        assert len(service.list_payments()) == len(DEFAULT_PAYMENT_TYPES)

    def test_clear_with_yes(self, runner, service, sample_restaurant):
        result = runner.invoke(args=["restaurant", "clear", "--yes"])

        assert result.exit_code == 0
        assert "Deleted 1 restaurant(s)" in result.output
        assert service.list() == []

    def test_clear_aborted(self, runner, service, sample_restaurant):
        result = runner.invoke(args=["restaurant", "clear"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted." in result.output
        assert len(service.list()) == 1


class TestPaymentCommands:
    def test_add_and_list(self, runner):
        result = runner.invoke(args=["payment", "add", "Gift Card"])
        assert result.exit_code == 0
        assert "Gift Card" in result.output

        result = runner.invoke(args=["payment", "list"])
        assert result.exit_code == 0
        assert "Gift Card" in result.output

    def test_add_blank_type(self, runner):
        result = runner.invoke(args=["payment", "add", "   "])

        assert result.exit_code != 0
        assert "Payment type is required" in result.output

    def test_list_empty(self, runner):
        result = runner.invoke(args=["payment", "list"])

        assert result.exit_code == 0
        assert "No payment methods found." in result.output
