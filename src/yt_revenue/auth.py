from __future__ import annotations

from pathlib import Path
from typing import Any, NamedTuple, Sequence

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from yt_revenue.config import CLIENT_SECRETS_FILE, SCOPES, TOKEN_FILE


class Services(NamedTuple):
    youtube: Any
    analytics: Any


def load_cached_credentials(token_file: Path, scopes: Sequence[str]) -> Credentials | None:
    if not token_file.exists():
        return None
    creds = Credentials.from_authorized_user_file(str(token_file), list(scopes))
    if creds.expired and creds.refresh_token:
        creds.refresh(Request())
    return creds


def get_credentials(
    client_secret_file: Path = CLIENT_SECRETS_FILE,
    token_file: Path = TOKEN_FILE,
    scopes: Sequence[str] = SCOPES,
) -> Credentials:
    if not client_secret_file.exists():
        raise FileNotFoundError(
            f"Client secret file not found at {client_secret_file}. Download it from the Google Cloud console."
        )

    creds = load_cached_credentials(token_file, scopes)
    if creds and creds.valid:
        return creds

    flow = InstalledAppFlow.from_client_secrets_file(str(client_secret_file), list(scopes))
    creds = flow.run_local_server(port=0, prompt="consent")
    token_file.parent.mkdir(parents=True, exist_ok=True)
    token_file.write_text(creds.to_json())
    print(f"Saved refresh token to {token_file}")
    return creds


def build_services(credentials: Credentials) -> Services:
    return Services(
        youtube=build("youtube", "v3", credentials=credentials),
        analytics=build("youtubeAnalytics", "v2", credentials=credentials),
    )
