"""
Display management for the AllSongs CLI with Rich components.
"""

from typing import Any, Callable, Optional, Sequence

from rich import box
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models.tracks import TrackRecord
from ..services.pipeline import PipelineResult


class DisplayManager:
    """Formats pipeline output for the terminal."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )
    
    def show_loading_spinner(self, message: str, task_func: Callable, *args, **kwargs) -> Any:
        """Show a loading spinner while executing a task."""
        with self.console.status(f"[bold cyan]{message}[/bold cyan]", spinner="dots"):
            return task_func(*args, **kwargs)
    
    def display_tracks(self, tracks: Sequence[TrackRecord]):
        """Display the resolved track list."""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE,
            border_style="blue",
            show_lines=False
        )
        
        table.add_column("#", style="bold white", width=4, justify="right")
        table.add_column("Track Title", style="white", width=45)
        table.add_column("Type", style="magenta", width=12, justify="center")
        table.add_column("Duration", style="cyan", width=8, justify="center")
        table.add_column("ISRC", style="yellow", width=14)
        table.add_column("Artists", style="green", width=30)
        
        for index, track in enumerate(tracks, start=1):
            release_type = track.release_type
            if track.external:
                release_type += " [dim](guest)[/dim]"
            table.add_row(
                str(index),
                escape(track.title),
                release_type,
                track.duration or "—",
                track.isrc or "[dim]—[/dim]",
                escape(", ".join(track.artists))
            )
        
        self.console.print(table)
    
    def display_summary(self, result: PipelineResult):
        """Display counts for each pipeline stage."""
        summary_content = (
            f"[cyan]Releases fetched:[/cyan] {len(result.releases)}\n"
            f"[cyan]Tracks loaded:[/cyan] {result.loaded_count}\n"
            f"[cyan]Unique recordings:[/cyan] {result.resolved_count}\n"
            f"[bold green]✓[/bold green] Tracks kept: [green]{len(result.tracks)}[/green]"
        )
        if result.playlist:
            summary_content += f"\n[bold green]✓[/bold green] Playlist: [yellow]{result.playlist.name}[/yellow]"
            if result.playlist.url:
                summary_content += f" [dim]{result.playlist.url}[/dim]"
            if not result.playlist.followed:
                summary_content += "\n[yellow]⚠[/yellow] Artist was not followed"
        
        self.console.print()
        self.console.print(Panel(
            summary_content,
            title=f"[bold cyan]📊 {result.artist_name or result.artist_id}[/bold cyan]",
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        ))
        self.console.print()
    
    def print_error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")
    
    def print_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")
    
    def print_success(self, message: str):
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")
