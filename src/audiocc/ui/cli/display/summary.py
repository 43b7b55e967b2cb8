"""Utilities for rendering the end-of-run summary."""

from __future__ import annotations

from rich.console import Console

from audiocc.features.processing import RunReport


def render_run_summary(console: Console, report: RunReport) -> None:
    """Render bundle and file counts plus every failure of ``report``.

    Args:
        console: Rich console instance used to render output.
        report: Finished run report.
    """
    moved = sum(1 for bundle in report.bundles if bundle.destination is not None)
    skipped = sum(1 for bundle in report.bundles if bundle.skipped)

    header = "Dry run summary" if report.dry_run else "Summary"
    console.print(f"\n[bold]{header}:[/bold]")
    console.print(f"Files: {report.total_files}")
    console.print(f"Folders: {len(report.bundles)}")
    console.print(f"[green]Folders moved: {moved}[/green]")
    if skipped:
        console.print(f"[yellow]Folders skipped: {skipped}[/yellow]")

    if not report.has_failures:
        return

    console.print(f"[red]Failed files: {report.failed_files}[/red]")
    for bundle in report.bundles:
        if bundle.error:
            console.print(f"  • {bundle.directory}: {bundle.error}", style="red", markup=False)
        for failed in bundle.errors:
            console.print(f"  • {failed.error}", style="red", markup=False)
