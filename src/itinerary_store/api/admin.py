"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from itinerary_store.api.admin_views import UserSummaryView

if TYPE_CHECKING:
    from itinerary_store.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
async def list_users(request: Request) -> dict[str, object]:
    """Return every user with itineraries, most recently active first."""
    container: AppContainer = request.app.state.container
    summaries = await container.admin_service.list_all_users()
    return {
        "users": [
            UserSummaryView.from_summary(summary).model_dump(by_alias=True)
            for summary in summaries
        ]
    }


@router.get(
    "/users/{username}/itineraries/{file_id}", dependencies=[Depends(require_admin)]
)
async def inspect_itinerary(
    username: str, file_id: str, request: Request
) -> dict[str, object]:
    """Return one itinerary for inspection."""
    container: AppContainer = request.app.state.container
    document = await container.admin_service.get_itinerary(username, file_id)
    return {
        "username": document.username,
        "id": document.id,
        "name": document.display_name,
        "updatedAt": document.updated_at,
        "data": document.data,
    }


@router.delete("/users/{username}", dependencies=[Depends(require_admin)])
async def delete_user(username: str, request: Request) -> dict[str, str]:
    """Delete all itineraries of a user."""
    container: AppContainer = request.app.state.container
    await container.admin_service.delete_user(username)
    return {"status": "deleted"}


@router.delete(
    "/users/{username}/itineraries/{file_id}", dependencies=[Depends(require_admin)]
)
async def delete_itinerary(
    username: str, file_id: str, request: Request
) -> dict[str, str]:
    """Delete a single itinerary of a user."""
    container: AppContainer = request.app.state.container
    await container.admin_service.delete_itinerary(username, file_id)
    return {"status": "deleted"}


@router.get("/ui", response_class=HTMLResponse)
async def admin_ui() -> HTMLResponse:
    """Minimal admin UI that consumes the admin API."""
    return HTMLResponse(_ADMIN_UI_HTML)


_ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Itinerary Admin</title>
    <style>
      body { font-family: ui-serif, Georgia, serif; margin: 2rem; color: #292524; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.3rem 0.7rem; margin-right: 0.5rem; }
      .user { border: 1px solid #e7e5e4; padding: 0.75rem; margin-bottom: 0.5rem; }
      .files { margin: 0.5rem 0 0 1rem; }
      .error { color: #b91c1c; }
    </style>
  </head>
  <body>
    <h1>Itinerary Admin</h1>
    <div class="row">
      <label>Admin token</label><br />
      <input id="token" type="password" placeholder="X-Admin-Token" />
      <button onclick="loadUsers()">Load users</button>
    </div>
    <div id="status"></div>
    <div id="users"></div>
    <script>
      function headers() {
        return { 'X-Admin-Token': document.getElementById('token').value };
      }

      async function loadUsers() {
        const status = document.getElementById('status');
        const list = document.getElementById('users');
        status.textContent = 'Loading...';
        status.className = '';
        const res = await fetch('/admin/users', { headers: headers() });
        if (!res.ok) {
          status.textContent = 'Failed to load users (' + res.status + ')';
          status.className = 'error';
          return;
        }
        const data = await res.json();
        status.textContent = data.users.length + ' users';
        list.innerHTML = '';
        for (const user of data.users) {
          const box = document.createElement('div');
          box.className = 'user';
          const title = document.createElement('div');
          title.textContent = user.username + ' - ' + user.itineraryCount +
            ' itineraries, last updated ' + user.lastUpdatedDisplay;
          const remove = document.createElement('button');
          remove.textContent = 'Delete user';
          remove.onclick = () => removePath('/admin/users/' +
            encodeURIComponent(user.username), 'user ' + user.username);
          title.appendChild(remove);
          box.appendChild(title);
          const files = document.createElement('ul');
          files.className = 'files';
          for (const file of user.itineraries) {
            const item = document.createElement('li');
            item.textContent = file.name + ' (' + file.updatedAt + ') ';
            const del = document.createElement('button');
            del.textContent = 'Delete';
            del.onclick = () => removePath('/admin/users/' +
              encodeURIComponent(user.username) + '/itineraries/' +
              encodeURIComponent(file.id), 'itinerary ' + file.name);
            item.appendChild(del);
            files.appendChild(item);
          }
          box.appendChild(files);
          list.appendChild(box);
        }
      }

      async function removePath(path, label) {
        if (!confirm('Delete ' + label + '?')) {
          return;
        }
        const res = await fetch(path, { method: 'DELETE', headers: headers() });
        if (!res.ok) {
          alert('Delete failed (' + res.status + ')');
          return;
        }
        await loadUsers();
      }
    </script>
  </body>
</html>
"""
