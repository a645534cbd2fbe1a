from __future__ import annotations

from typing import Any, Iterable, Sequence

from yt_revenue.models import Channel, Playlist, PlaylistItem
from yt_revenue.pagination import fetch_all

CHANNEL_FIELDS = "items(id,snippet/title)"
PLAYLIST_FIELDS = "items(id,snippet/title),nextPageToken"
PLAYLIST_ITEM_FIELDS = "items(contentDetails/videoId,id,snippet/title),nextPageToken"


class ChannelNotFoundError(RuntimeError):
    pass


def get_main_channel(youtube_service: Any) -> Channel:
    response = youtube_service.channels().list(part="id,snippet", mine=True, fields=CHANNEL_FIELDS).execute()
    items = response.get("items", [])
    if not items:
        raise ChannelNotFoundError("No channel found for the authenticated account.")
    return Channel.from_item(items[0])


def list_playlists(youtube_service: Any, channel_id: str) -> list[Playlist]:
    items = fetch_all(
        youtube_service.playlists(),
        part="id,snippet",
        channelId=channel_id,
        fields=PLAYLIST_FIELDS,
    )
    return [Playlist.from_item(item) for item in items]


def sort_playlists(playlists: Iterable[Playlist]) -> list[Playlist]:
    return sorted(playlists, key=lambda playlist: playlist.title)


def list_playlist_items(youtube_service: Any, playlist_id: str) -> list[PlaylistItem]:
    items = fetch_all(
        youtube_service.playlistItems(),
        part="snippet,contentDetails",
        playlistId=playlist_id,
        fields=PLAYLIST_ITEM_FIELDS,
    )
    return [PlaylistItem.from_item(item) for item in items]


def extract_video_ids(playlist_items: Sequence[PlaylistItem]) -> list[str]:
    return [item.video_id for item in playlist_items]


def list_video_ids(youtube_service: Any, playlist_id: str) -> list[str]:
    return extract_video_ids(list_playlist_items(youtube_service, playlist_id))
