"""
Tests d'intégration API pour les groupes.
Testent les URLs, les codes HTTP, l'authentification et le format des réponses.
"""

from datetime import datetime
from unittest.mock import patch

from topic_registration.errors import ConflictError, InternalError, ValidationError
from topic_registration.models.group import Group


# --- Helper ---

def make_group(**kwargs) -> Group:
    return Group(
        id=kwargs.get("id", 1),
        group_name=kwargs.get("group_name", "Alpha"),
        createdAt=datetime(2019, 1, 18, 10, 0),
        updatedAt=datetime(2019, 1, 18, 10, 0),
    )


# ============================================================
# POST /api/groups
# ============================================================

def test_create_group_succes(client, user_headers):
    """Création d'un groupe valide → 200 avec id et timestamps."""
    with patch("topic_registration.routers.groups.groups.create") as mock:
        mock.return_value = make_group(group_name="Alpha")
        response = client.post("/api/groups", json={"group_name": "Alpha"}, headers=user_headers)

    assert response.status_code == 200
    group = response.json()["group"]
    assert group["id"] == 1
    assert group["group_name"] == "Alpha"
    assert "createdAt" in group and "updatedAt" in group
    mock.assert_called_once()
    assert mock.call_args.args[1] == {"group_name": "Alpha"}


def test_create_group_sans_token(client):
    """Connexion requise → 401."""
    response = client.post("/api/groups", json={"group_name": "Alpha"})
    assert response.status_code == 401
    assert "error" in response.json()


def test_create_group_token_invalide(client):
    response = client.post(
        "/api/groups", json={"group_name": "Alpha"}, headers={"Authorization": "Bearer pas-un-jwt"}
    )
    assert response.status_code == 401


def test_create_group_nom_manquant(client, user_headers):
    """Nom absent → 400 avec le message du service."""
    with patch("topic_registration.routers.groups.groups.create") as mock:
        mock.side_effect = ValidationError("group name undefined")
        response = client.post("/api/groups", json={}, headers=user_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "group name undefined"}


def test_create_group_nom_duplique(client, user_headers):
    with patch("topic_registration.routers.groups.groups.create") as mock:
        mock.side_effect = ConflictError("a group with that name already exists")
        response = client.post("/api/groups", json={"group_name": "Alpha"}, headers=user_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "a group with that name already exists"}


def test_create_group_erreur_base(client, user_headers):
    """Erreur inattendue de la base → 500 avec message générique."""
    with patch("topic_registration.routers.groups.groups.create") as mock:
        mock.side_effect = InternalError("database error")
        response = client.post("/api/groups", json={"group_name": "Alpha"}, headers=user_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "database error"}


def test_create_group_corps_illisible(client, user_headers):
    """JSON mal formé → 400, pas 422."""
    response = client.post(
        "/api/groups",
        content=b"{not json",
        headers={**user_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400


# ============================================================
# GET / DELETE /api/groups
# ============================================================

def test_list_groups_admin(client, admin_headers):
    with patch("topic_registration.routers.groups.groups.list") as mock:
        mock.return_value = [make_group(), make_group(id=2, group_name="Beta")]
        response = client.get("/api/groups", headers=admin_headers)

    assert response.status_code == 200
    assert [g["group_name"] for g in response.json()["groups"]] == ["Alpha", "Beta"]


def test_list_groups_non_admin(client, user_headers):
    """Route admin appelée par un étudiant → 403."""
    response = client.get("/api/groups", headers=user_headers)
    assert response.status_code == 403
    assert response.json() == {"error": "admin privileges required"}


def test_delete_group(client, admin_headers):
    with patch("topic_registration.routers.groups.groups.delete") as mock:
        mock.return_value = False
        response = client.delete("/api/groups/3", headers=admin_headers)

    assert response.status_code == 204
    assert response.content == b""
    mock.assert_called_once()
