"""Where to get the companion remote apps."""

COMPANION_APP_LINKS: dict[str, str] = {
    "play_store": "https://play.google.com/store/apps/details?id=de.qspool.clementineremote",
    "play_store_2": "https://play.google.com/store/apps/details?id=fr.mbruel.ClementineRemote",
    "apple_store": "https://apps.apple.com/fr/app/clemremote/id1541922045",
    "desktop_remote": "https://github.com/mbruel/ClementineRemote/releases/latest",
}


def link_for(trigger: str) -> str | None:
    return COMPANION_APP_LINKS.get(trigger)
