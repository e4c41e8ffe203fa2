"""
NHL Team Reference

Read-only reference data for NHL franchises, keyed by abbreviation.
Lookups accept an abbreviation, full name, or short name.
"""

from pydantic import BaseModel, ConfigDict

LOGO_URL_TEMPLATE = "https://assets.nhle.com/logos/nhl/svg/{abbrev}_light.svg"


class NHLTeam(BaseModel):
    """An NHL franchise."""

    model_config = ConfigDict(frozen=True)

    abbreviation: str
    full_name: str
    short_name: str
    url_slug: str

    @property
    def logo_url(self) -> str:
        """Light-theme SVG logo URL."""
        return get_logo_url(self.abbreviation)


NHL_TEAMS: tuple[NHLTeam, ...] = tuple(
    NHLTeam(abbreviation=abbrev, full_name=full, short_name=short, url_slug=slug)
    for abbrev, full, short, slug in (
        ("ANA", "Anaheim Ducks", "Ducks", "ducks"),
        ("ARI", "Arizona Coyotes", "Coyotes", "coyotes"),
        ("BOS", "Boston Bruins", "Bruins", "bruins"),
        ("BUF", "Buffalo Sabres", "Sabres", "sabres"),
        ("CGY", "Calgary Flames", "Flames", "flames"),
        ("CAR", "Carolina Hurricanes", "Hurricanes", "hurricanes"),
        ("CHI", "Chicago Blackhawks", "Blackhawks", "blackhawks"),
        ("COL", "Colorado Avalanche", "Avalanche", "avalanche"),
        ("CBJ", "Columbus Blue Jackets", "Blue Jackets", "bluejackets"),
        ("DAL", "Dallas Stars", "Stars", "stars"),
        ("DET", "Detroit Red Wings", "Red Wings", "redwings"),
        ("EDM", "Edmonton Oilers", "Oilers", "oilers"),
        ("FLA", "Florida Panthers", "Panthers", "panthers"),
        ("LAK", "Los Angeles Kings", "Kings", "kings"),
        ("MIN", "Minnesota Wild", "Wild", "wild"),
        ("MTL", "Montreal Canadiens", "Canadiens", "canadiens"),
        ("NSH", "Nashville Predators", "Predators", "predators"),
        ("NJD", "New Jersey Devils", "Devils", "devils"),
        ("NYI", "New York Islanders", "Islanders", "islanders"),
        ("NYR", "New York Rangers", "Rangers", "rangers"),
        ("OTT", "Ottawa Senators", "Senators", "senators"),
        ("PHI", "Philadelphia Flyers", "Flyers", "flyers"),
        ("PIT", "Pittsburgh Penguins", "Penguins", "penguins"),
        ("SEA", "Seattle Kraken", "Kraken", "kraken"),
        ("SJS", "San Jose Sharks", "Sharks", "sharks"),
        ("STL", "St. Louis Blues", "Blues", "blues"),
        ("TBL", "Tampa Bay Lightning", "Lightning", "lightning"),
        ("TOR", "Toronto Maple Leafs", "Maple Leafs", "mapleleafs"),
        ("VAN", "Vancouver Canucks", "Canucks", "canucks"),
        ("VGK", "Vegas Golden Knights", "Golden Knights", "goldenknights"),
        ("WSH", "Washington Capitals", "Capitals", "capitals"),
        ("WPG", "Winnipeg Jets", "Jets", "jets"),
    )
)

NHL_TEAMS_BY_ABBREV: dict[str, NHLTeam] = {team.abbreviation: team for team in NHL_TEAMS}
NHL_TEAMS_BY_FULL_NAME: dict[str, NHLTeam] = {team.full_name: team for team in NHL_TEAMS}
NHL_TEAMS_BY_SHORT_NAME: dict[str, NHLTeam] = {team.short_name: team for team in NHL_TEAMS}


def get_nhl_team(identifier: str | None) -> NHLTeam | None:
    """
    Look up a team by abbreviation, full name, or short name.

    Args:
        identifier: Abbreviation ("BOS"), full name ("Boston Bruins") or
            short name ("Bruins")

    Returns:
        NHLTeam or None if unknown
    """
    if not identifier:
        return None
    key = identifier.strip()
    return (
        NHL_TEAMS_BY_ABBREV.get(key.upper())
        or NHL_TEAMS_BY_FULL_NAME.get(key)
        or NHL_TEAMS_BY_SHORT_NAME.get(key)
    )


def to_abbreviation(identifier: str | None) -> str:
    """Return the canonical abbreviation, or the stripped input if unknown."""
    team = get_nhl_team(identifier)
    if team is not None:
        return team.abbreviation
    return (identifier or "").strip()


def get_url_slug(identifier: str | None) -> str:
    """Return the nhl.com URL slug for a team."""
    if not identifier:
        return ""
    team = get_nhl_team(identifier)
    if team is not None:
        return team.url_slug
    return "".join(identifier.lower().split())


def get_logo_url(abbreviation: str) -> str:
    """Return the logo URL for a team abbreviation."""
    return LOGO_URL_TEMPLATE.format(abbrev=abbreviation)
