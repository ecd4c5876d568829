"""
Tema de la interfaz CLI.

- palette: paletas y consola Rich
- styled: objetos Text estilizados
- printing: impresión directa a consola
- tables: tablas de series
"""

from hidronum.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    PALETTES,
    set_theme,
    get_console,
    get_palette,
)

from hidronum.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_message,
)

from hidronum.cli.theme.printing import (
    format_number,
    print_header,
    print_section,
    print_field,
    print_success,
    print_warning,
    print_error,
)

from hidronum.cli.theme.tables import (
    create_results_table,
    print_series_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "PALETTES",
    "set_theme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_label",
    "styled_message",
    # printing
    "format_number",
    "print_header",
    "print_section",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    # tables
    "create_results_table",
    "print_series_table",
]
