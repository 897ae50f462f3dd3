"""KiCad schematic clipboard snippets for each regulator's feedback network.

Placeholders filled by the template renderer:
``{{VOUT}}``, ``{{R1val}}``, ``{{R2val}}``, ``{{R1lcsc}}``, ``{{R2lcsc}}``.
"""

from __future__ import annotations

_RESISTOR_LIB_SYMBOL = """  (lib_symbols
    (symbol "Device:R" (pin_numbers hide) (pin_names (offset 0)) (in_bom yes) (on_board yes)
      (property "Reference" "R" (at 2.032 0 90) (effects (font (size 1.27 1.27))))
      (property "Value" "R" (at 0 0 90) (effects (font (size 1.27 1.27))))
      (property "Footprint" "" (at -1.778 0 90) (effects (font (size 1.27 1.27)) hide))
      (symbol "R_0_1"
        (rectangle (start -1.016 -2.54) (end 1.016 2.54) (stroke (width 0.254) (type default)) (fill (type none)))
      )
      (symbol "R_1_1"
        (pin passive line (at 0 3.81 270) (length 1.27) (name "~" (effects (font (size 1.27 1.27)))) (number "1" (effects (font (size 1.27 1.27)))))
        (pin passive line (at 0 -3.81 90) (length 1.27) (name "~" (effects (font (size 1.27 1.27)))) (number "2" (effects (font (size 1.27 1.27)))))
      )
    )
  )"""


def _resistor(reference: str, value: str, lcsc: str, x: float, y: float) -> str:
    return f"""  (symbol (lib_id "Device:R") (at {x} {y} 0) (unit 1) (in_bom yes) (on_board yes)
    (property "Reference" "{reference}" (at {x + 2.54:g} {y - 1.27:g} 0) (effects (font (size 1.27 1.27)) (justify left)))
    (property "Value" "{value}" (at {x + 2.54:g} {y + 1.27:g} 0) (effects (font (size 1.27 1.27)) (justify left)))
    (property "Footprint" "Resistor_SMD:R_0402_1005Metric" (at {x} {y} 0) (effects (font (size 1.27 1.27)) hide))
    (property "LCSC" "{lcsc}" (at {x} {y} 0) (effects (font (size 1.27 1.27)) hide))
  )"""


def _feedback_snippet(device: str, fb_note: str) -> str:
    return "\n".join(
        [
            "(kicad_sch (version 20230121) (generator eeschema)",
            _RESISTOR_LIB_SYMBOL,
            _resistor("R1", "{{R1val}}", "{{R1lcsc}}", 127.0, 88.9),
            _resistor("R2", "{{R2val}}", "{{R2lcsc}}", 127.0, 101.6),
            "  (wire (pts (xy 127 92.71) (xy 127 97.79)) (stroke (width 0) (type default)))",
            "  (wire (pts (xy 127 95.25) (xy 119.38 95.25)) (stroke (width 0) (type default)))",
            '  (label "FB" (at 119.38 95.25 180) (effects (font (size 1.27 1.27)) (justify right)))',
            '  (label "VOUT" (at 127 85.09 90) (effects (font (size 1.27 1.27)) (justify left)))',
            '  (symbol (lib_id "power:GND") (at 127 105.41 0) (unit 1) (in_bom yes) (on_board yes)',
            '    (property "Reference" "#PWR01" (at 127 111.76 0) (effects (font (size 1.27 1.27)) hide))',
            '    (property "Value" "GND" (at 127 109.22 0) (effects (font (size 1.27 1.27))))',
            "  )",
            f'  (text "{device} feedback: VOUT = {{{{VOUT}}}}V\\n{fb_note}"',
            "    (at 134.62 95.25 0) (effects (font (size 1.27 1.27)) (justify left))",
            "  )",
            ")",
            "",
        ]
    )


TLV62578_TEMPLATE = _feedback_snippet(
    "TLV62578",
    "VOUT = 0.6V * (1 + R1/R2), keep R2 below 100k",
)

LMR33630_TEMPLATE = _feedback_snippet(
    "LMR33630",
    "VOUT = 1.0V * (1 + R1/R2), R1 near 100k recommended",
)
