"""Integration tests for routes."""


def test_home_page(client):
    """Home page is accessible without certificate."""
    response = client.get("/")
    assert response.is_success
    assert "White House" in response.body


def test_play_requires_cert(client):
    """Play page requires a client certificate."""
    response = client.get("/play")
    assert response.is_certificate_required


def test_play_with_cert(auth_client):
    """Play page shows the starting scene."""
    response = auth_client.get("/play")
    assert response.is_success
    assert "West of House" in response.body
    assert "Score: 0 of 55" in response.body


def test_go_direction_blocked(auth_client):
    """The window starts closed, so east is blocked."""
    response = auth_client.get("/go/east")
    assert response.is_success
    assert "The window is closed." in response.body


def test_cmd_input_prompt(auth_client):
    """The /cmd route prompts for input when no query."""
    response = auth_client.get("/cmd")
    assert response.is_input_required


def test_cmd_with_input(auth_client):
    """The /cmd route processes commands and saves progress."""
    response = auth_client.get_input("/cmd", "open window")
    assert response.is_success
    assert "open the window" in response.body

    response = auth_client.get("/go/east")
    assert response.is_success
    assert "Kitchen" in response.body
    assert "Score: 10 of 55" in response.body


def test_unknown_command(auth_client):
    response = auth_client.get_input("/cmd", "dance wildly")
    assert response.is_success
    assert "know how to do that" in response.body


def test_inventory_route(auth_client):
    """The /inventory route shows inventory."""
    response = auth_client.get("/inventory")
    assert response.is_success
    assert "empty-handed" in response.body


def test_score_route(auth_client):
    """The /score route shows score."""
    response = auth_client.get("/score")
    assert response.is_success
    assert "Your score is 0 out of a possible 55" in response.body


def test_hints_route(auth_client):
    response = auth_client.get("/hints")
    assert response.is_success
    assert "open small mailbox" in response.body


def test_help_page(client):
    """Help page is accessible."""
    response = client.get("/help")
    assert response.is_success
    assert "put [thing] in [container]" in response.body


def test_about_page(client):
    """About page is accessible."""
    response = client.get("/about")
    assert response.is_success
    assert "White House" in response.body


def test_new_game_prompt(auth_client):
    """The /new route prompts for confirmation."""
    response = auth_client.get("/new")
    assert response.is_input_required


def test_new_game_confirmed(auth_client):
    auth_client.get_input("/cmd", "open mailbox")
    response = auth_client.get_input("/new", "YES")
    assert response.is_success
    assert "Welcome to the White House" in response.body


def test_look_route(auth_client):
    """The /look route works."""
    response = auth_client.get("/look")
    assert response.is_success
    assert "small mailbox" in response.body
