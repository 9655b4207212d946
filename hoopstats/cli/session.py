"""Interactive roster session."""

import click
from datetime import date

from ..export import export_roster
from ..helpers.aggregation import calculate_totals
from ..helpers.summary import roster_summary
from ..models.game import GameStats, InvalidGameStatsError
from ..models.player import Player
from ..store.roster import RosterError, RosterStore

HELP_TEXT = """Commands:
  add NAME        Add a player
  remove PLAYER   Remove a player (name or id)
  game PLAYER     Record a game for a player
  show [PLAYER]   Show totals and per-game averages
  table           Show a summary table of every player
  export [PATH]   Write the roster to JSON
  help            Show this help
  quit            Leave the session"""

# (form field, prompt label)
GAME_PROMPTS = [
    ('twoPoints', '2PT'),
    ('threePoints', '3PT'),
    ('ftMade', 'FT Made'),
    ('ftAtt', 'FT Attempted'),
    ('rebounds', 'Rebounds'),
    ('steals', 'Steals'),
    ('blocks', 'Blocks'),
    ('assists', 'Assists'),
]

TABLE_COLUMNS = [
    'name', 'games_played', 'total_points', 'points_per_game', 'free_throw_pct',
    'rebounds_per_game', 'assists_per_game', 'steals_per_game', 'blocks_per_game',
]


def resolve_player(store: RosterStore, ref: str):
    """Look a player up by id, then by name."""
    ref = ref.strip()
    player = store.roster.get(ref)
    if player is None:
        player = store.roster.find_by_name(ref)
    return player


def format_report(player: Player, count_free_throws: bool = False) -> str:
    totals = calculate_totals(player.games, count_free_throws=count_free_throws)
    return "\n".join([
        f"{player.name} ({player.id})",
        f"  Total Games: {totals.games_played}",
        f"  Total Points: {totals.total_points} (PPG: {totals.points_per_game})",
        f"  FT %: {totals.free_throw_pct}%",
        f"  Rebounds: {totals.rebounds} (RPG: {totals.rebounds_per_game})",
        f"  Assists: {totals.assists} (APG: {totals.assists_per_game})",
        f"  Steals: {totals.steals} (SPG: {totals.steals_per_game})",
        f"  Blocks: {totals.blocks} (BPG: {totals.blocks_per_game})",
    ])


def do_add(store, config, arg):
    before = len(store.roster)
    roster = store.add_player(arg)
    if len(roster) == before:
        click.echo(click.style("  Player name can't be blank", fg='yellow'))
        return
    player = roster.players[-1]
    click.echo(click.style(f"  Added {player.name} ({player.id})", fg='green'))


def do_remove(store, config, arg):
    # Only an id or a full name removes a player
    ref = arg.strip()
    player = store.roster.get(ref) or store.roster.find_by_exact_name(ref)
    player_id = player.id if player else ref
    before = len(store.roster)
    store.remove_player(player_id)
    if len(store.roster) == before:
        click.echo(click.style(f"  No player matching {arg!r}", fg='yellow'))
    else:
        click.echo(click.style(f"  Removed {player.name}", fg='green'))


def do_game(store, config, arg):
    player = resolve_player(store, arg)
    if player is None:
        click.echo(click.style(f"  No player matching {arg!r}", fg='yellow'))
        return

    form = {'date': click.prompt('  Date', default=date.today().isoformat())}
    for field, label in GAME_PROMPTS:
        form[field] = click.prompt(f"  {label}", default='', show_default=False)

    try:
        stats = GameStats.from_form(form)
    except InvalidGameStatsError as e:
        click.echo(click.style(f"  Game not added: {e}", fg='red'))
        return

    store.append_game(player.id, stats)
    click.echo(click.style(f"  Recorded game on {stats.date} for {player.name}", fg='green'))


def do_show(store, config, arg):
    if arg.strip():
        player = resolve_player(store, arg)
        if player is None:
            click.echo(click.style(f"  No player matching {arg!r}", fg='yellow'))
            return
        players = [player]
    else:
        players = list(store.roster)

    if not players:
        click.echo("  No players yet.")
        return
    for player in players:
        click.echo(format_report(player, config.count_free_throws))


def do_table(store, config, arg):
    df = roster_summary(store.roster, count_free_throws=config.count_free_throws)
    if df.empty:
        click.echo("  No players yet.")
        return
    click.echo(df[TABLE_COLUMNS].to_string(index=False))


def do_export(store, config, arg):
    path = arg.strip() or config.export_path
    try:
        out = export_roster(store.roster, path, indent=config.export_indent)
    except OSError as e:
        click.echo(click.style(f"  Export failed: {e}", fg='red'))
        return
    click.echo(click.style(f"  Exported {len(store.roster)} players to {out}", fg='green'))


def do_help(store, config, arg):
    click.echo(HELP_TEXT)


COMMANDS = {
    'add': do_add,
    'remove': do_remove,
    'delete': do_remove,
    'game': do_game,
    'show': do_show,
    'table': do_table,
    'export': do_export,
    'help': do_help,
}


@click.command()
@click.pass_context
def session(ctx):
    """Interactive session: add players, record games, view stats, export.

    Data lives in memory for the length of the session. Use 'export' to
    save it as JSON before quitting.
    """
    config = ctx.obj['config']
    store = RosterStore(strict=config.strict)

    click.echo("=" * 60)
    click.echo("Basketball Pro Stats")
    click.echo("=" * 60)
    click.echo("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt('hoopstats', default='', show_default=False, prompt_suffix='> ')
        except click.Abort:
            click.echo()
            break

        command, _, arg = line.strip().partition(' ')
        command = command.lower()
        if not command:
            continue
        if command in ('quit', 'exit'):
            break

        handler = COMMANDS.get(command)
        if handler is None:
            click.echo(click.style(f"  Unknown command: {command} (try 'help')", fg='yellow'))
            continue

        try:
            handler(store, config, arg)
        except RosterError as e:
            click.echo(click.style(f"  Error: {e}", fg='red'))

    click.echo(f"Session ended with {len(store.roster)} players.")
