"""Layout sizes, window settings and colours shared by the whole game."""

MAGICAL_ADJUSTMENT_NUMBER: float = 32.0

CELL_SIZE: float = 90.0
CANDIDATE_SIZE: float = CELL_SIZE / 3.0

RESOLUTION: tuple[float, float] = (
    CELL_SIZE * 10.0 + 10.0,
    CELL_SIZE * 10.0 + 10.0 + MAGICAL_ADJUSTMENT_NUMBER,
)
TITLE: str = "Kodumaro Numplës"

BACKGROUND_COLOR: tuple[int, int, int] = (0xF5, 0xDE, 0xB3)
WIN_COLOR: tuple[int, int, int] = (0x00, 0x2A, 0x35)
TITLE_COLOR: tuple[int, int, int] = (0x00, 0x8B, 0x8B)

UNSELECTED_COLOR: tuple[int, int, int] = (0x8B, 0x8B, 0x8B)
SELECTED_COLOR: tuple[int, int, int] = (0x00, 0x00, 0x00)