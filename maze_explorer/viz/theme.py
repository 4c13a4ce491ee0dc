from dataclasses import dataclass, field
import pygame


def parse_colour(value) -> pygame.Color:
    # pygame.Color takes names, "#rrggbb" and tuples but not CSS "#rgb"
    if isinstance(value, str) and len(value) == 4 and value.startswith("#"):
        value = "#" + "".join(ch * 2 for ch in value[1:])
    return pygame.Color(value)


@dataclass
class Theme:
    background: pygame.Color = field(default_factory=lambda: parse_colour("#333"))
    foreground: pygame.Color = field(default_factory=lambda: parse_colour("white"))
    solution: pygame.Color = field(default_factory=lambda: parse_colour("springgreen"))
    start: pygame.Color = field(default_factory=lambda: pygame.Color(2, 255, 2, 64))
    finish: pygame.Color = field(default_factory=lambda: pygame.Color(255, 2, 2, 64))

    @classmethod
    def from_strings(cls, background=None, foreground=None, solution=None) -> 'Theme':
        """Builds a theme, overriding only the colours that were given."""
        theme = cls()
        if background:
            theme.background = parse_colour(background)
        if foreground:
            theme.foreground = parse_colour(foreground)
        if solution:
            theme.solution = parse_colour(solution)
        return theme
