"""MCP prompts for Spotify workflows.

Exposes common listening workflows as prompts.
"""

# pyright: reportUnusedFunction=false

from fastmcp import FastMCP


def register(app: FastMCP) -> None:
    """Register prompts on the provided app instance."""

    @app.prompt(
        name="Summarize Now Playing",
        description="Create a prompt to summarize what Spotify is currently playing.",
        tags={"summary", "playback"},
    )
    def summarize_now_playing() -> str:
        return (
            "Please describe what is currently playing on Spotify. "
            "Use the get_playback_state tool, then mention the track, artist, device and progress. "
            "If nothing is playing, say so."
        )

    @app.prompt(
        name="Find Music",
        description="Create a prompt to find music matching a description and optionally play it.",
        tags={"search", "playback"},
    )
    def find_music(description: str, play_result: bool = False) -> str:
        prompt = (
            f"Find music on Spotify matching: '{description}'. "
            "Use the search tool and list the most relevant tracks, albums and artists."
        )
        if play_result:
            prompt += " Then start playback of the best matching track with the play tool."
        return prompt


__all__ = ["register"]
