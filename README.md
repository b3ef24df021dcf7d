# levelschemer

Draw nuclear level schemes from a plain-text description. Each scheme becomes
a page-sized vector figure (600 × 800 points) that shows:

- the energy levels as horizontal black bars, labelled
  `label (spin-parity), energy keV`; in the spin-parity (for example `2^+`)
  the digits, `+` and `-` that follow a `^` are set as a superscript,
- the transitions between levels as vertical arrows, labelled
  `type, intensity%`,
- the particle decay thresholds as coloured lines, dashed or solid, labelled
  with the channel in italics and the energy in keV,
- the isotope label, centred under the figure, with the same superscript rule.

The vertical scale is chosen so that the highest level or threshold, plus
100 keV of headroom, fits on the page. Figures are written as PDF and SVG.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Input format

A file holds one or more schemes, separated by lines that consist of exactly
`===`. Empty lines and lines that begin with `#` are ignored, as are lines
whose first word is not one of the tags below. Fields are separated by
whitespace.

```
# Isotope label; the mass number goes after ^
ISOTOPE: ^123Ab

# LEVEL: energy(keV) spin-parity label
LEVEL: 0.0 0^+ GS
LEVEL: 1225.1 2^+ 1st
LEVEL: 5006.5 4^+ 2nd

# TRANSITION: from(keV) to(keV) type intensity(%)
TRANSITION: 1225.1 0.0 E2 100
TRANSITION: 5006.5 1225.1 E2 80

# THRESHOLD: energy(keV) channel red green blue [dash lengths ...]
THRESHOLD: 2000.7 α 1 0 0 4 2
THRESHOLD: 3503.4 p 0 0.6 0 8 4
THRESHOLD: 4044.1 n 0 0 1

===

ISOTOPE: ^12C
LEVEL: 0.0 0^+ GS
LEVEL: 4439.8 2^+ 1st
TRANSITION: 4439.8 0.0 E2 100
```

- `ISOTOPE:` takes the rest of the line, stripped of surrounding whitespace.
- Colours are red, green and blue components between 0 and 1 (values outside
  are clamped when drawing).
- Dash lengths are read until the first word that is not a number. A
  threshold with no dash lengths is drawn as a solid line; a pattern with a
  negative length or a total of zero is rejected with `ValueError` when the
  scheme is drawn.
- A block that has no `LEVEL:` lines produces no scheme.
- A tagged line with too few fields, or with a word where a number is
  expected, raises `levelschemer.parser.SchemeParseError` (a `ValueError`)
  whose message and `lineno` attribute give the line number.

## Command line

```
levelschemer --help
levelschemer input.txt -o figures
```

The command reads the input file (by default `../input.txt`) and writes
`scheme_1.pdf`, `scheme_1.svg`, `scheme_2.pdf`, `scheme_2.svg` and so on, one
pair per scheme, into the directory given with `-o/--output-dir` (by default
the current directory), printing `Saved <pdf> and <svg>` for each pair. If the
input cannot be opened or read, it prints a message to standard error and
exits with status 1.

## Python use

```python
from levelschemer.scheme import LevelScheme
from levelschemer.parser import parse_file, parse_text
from levelschemer.renderer import render_figure, render_to_pdf, render_to_svg

scheme = LevelScheme()
scheme.isotope_label = "^123Ab"
scheme.add_level(0.0, "0^+", "GS")
scheme.add_level(1225.1, "2^+", "1st")
scheme.add_transition(1225.1, 0.0, "E2", 100.0)
scheme.add_threshold(2000.7, "α", [4.0, 2.0], 1.0, 0.0, 0.0)

print(scheme.format_scheme())
render_to_pdf(scheme, "scheme.pdf")
render_to_svg(scheme, "scheme.svg")

for number, parsed in enumerate(parse_file("input.txt"), start=1):
    render_to_svg(parsed, f"scheme_{number}.svg")
```

`levelschemer.scheme` holds the data model: the frozen dataclasses `Level`,
`Transition` and `Threshold`, and `LevelScheme` with its `levels`,
`transitions`, `thresholds` and `isotope_label` attributes. `add_threshold`
defaults to a red line dashed `(4, 2)`. `format_scheme` returns a text listing
of the levels and transitions, and `print_scheme(file=None)` writes it to the
given file or standard output.

`levelschemer.parser` offers `parse_file` (UTF-8 file), `parse_text` (a
string) and `parse_lines` (any iterable of lines); each returns a list of
`LevelScheme`.

`levelschemer.renderer` offers `render_to_pdf` and `render_to_svg`, and
`render_figure`, which returns the matplotlib `Figure` (data units are points,
y growing downwards) for further changes before saving. Helpers used in
drawing are public as well: `split_superscript`, `vertical_scale`,
`energy_to_y` and `format_energy`.

## Limitations

Levels, transitions and thresholds are drawn where their energies put them,
without any collision handling: labels of levels or thresholds that lie close
together overlap. Transitions are all drawn at the centre of the page and are
not checked against the levels of the scheme.