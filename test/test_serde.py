import unittest

from colorant import (
    InvalidHueFormat,
    InvalidNumber,
    InvalidSaturationLightnessFormat,
    parse,
    Colorant,
    Hsl,
    Hsla,
    Rgb,
    Rgba,
)
from colorant.serde import (
    Format,
    match_syntax,
    parse_alpha,
    parse_description,
    parse_format_spec,
    parse_hex_nibble,
    parse_hex_pair,
    parse_hue,
    parse_rgb,
    parse_saturation_lightness,
    stringify,
    Syntax,
)


class TestDecoders(unittest.TestCase):

    def test_hex_digits(self) -> None:
        self.assertEqual(parse_hex_pair('00'), 0.0)
        self.assertEqual(parse_hex_pair('ff'), 1.0)
        self.assertEqual(parse_hex_pair('80'), 128 / 255)
        self.assertEqual(parse_hex_nibble('f'), 1.0)
        self.assertEqual(parse_hex_nibble('8'), 8 / 15)
        self.assertNotEqual(parse_hex_nibble('8'), 8 / 255)

        for digits in ('', 'g0', '123', '+f'):
            with self.subTest(digits=digits):
                with self.assertRaises(InvalidNumber):
                    parse_hex_pair(digits)

    def test_rgb_field(self) -> None:
        for field, expected in {
            '0': 0.0,
            '255': 1.0,
            '51': 0.2,
            '0%': 0.0,
            '50%': 0.5,
            '100%': 1.0,
            '256': 1.0,
            '1000%': 1.0,
        }.items():
            with self.subTest(field=field):
                self.assertEqual(parse_rgb(field), expected)

        for field in ('', '%', 'x', '-1', '1.5', '1.5%', '٣'):
            with self.subTest(field=field):
                with self.assertRaises(InvalidNumber):
                    parse_rgb(field)

    def test_hue_field(self) -> None:
        self.assertEqual(parse_hue('0'), 0)
        self.assertEqual(parse_hue('120'), 120)
        self.assertEqual(parse_hue('720'), 720)
        with self.assertRaises(InvalidHueFormat) as context:
            parse_hue('120%')
        self.assertEqual(context.exception.field, '120%')
        with self.assertRaises(InvalidNumber):
            parse_hue('1e3')

    def test_saturation_lightness_field(self) -> None:
        self.assertEqual(parse_saturation_lightness('0%'), 0.0)
        self.assertEqual(parse_saturation_lightness('50%'), 0.5)
        self.assertEqual(parse_saturation_lightness('250%'), 2.5)
        with self.assertRaises(InvalidSaturationLightnessFormat):
            parse_saturation_lightness('50')
        with self.assertRaises(InvalidNumber):
            parse_saturation_lightness('5.5%')

    def test_alpha_field(self) -> None:
        for field, expected in {
            '0': 0.0,
            '1': 1.0,
            '0.5': 0.5,
            '0.': 0.0,
            '50%': 0.5,
            '100%': 1.0,
            '2': 2.0,
            '300%': 3.0,
        }.items():
            with self.subTest(field=field):
                self.assertEqual(parse_alpha(field), expected)

        for field in ('', '.5', '0.5%', 'half', '1e-1', '-1'):
            with self.subTest(field=field):
                with self.assertRaises(InvalidNumber):
                    parse_alpha(field)

    def test_long_fields(self) -> None:
        nines = '9' * 400
        self.assertEqual(parse_rgb(nines), 1.0)
        self.assertEqual(parse_rgb(f'{nines}%'), 1.0)
        self.assertEqual(parse_rgb('9' * 5000), 1.0)
        self.assertEqual(parse_rgb(f'{"0" * 5000}7'), 7 / 255)
        self.assertEqual(parse_alpha(nines), float('inf'))

        for parser, field in (
            (parse_hue, nines),
            (parse_hue, '9' * 5000),
            (parse_saturation_lightness, f'{nines}%'),
            (parse_alpha, f'{nines}%'),
        ):
            with self.subTest(parser=parser.__name__, digits=len(field)):
                with self.assertRaises(InvalidNumber) as context:
                    parser(field)
                self.assertEqual(context.exception.field, field)


class TestMatcher(unittest.TestCase):

    def test_syntax(self) -> None:
        for text, expected in {
            '#a1b2c3': (Syntax.HEX6, ('a1', 'b2', 'c3')),
            '0xa1b2c3': (Syntax.HEX6, ('a1', 'b2', 'c3')),
            '#abc': (Syntax.HEX3, ('a', 'b', 'c')),
            'rgb(1,2%,3)': (Syntax.RGB, ('1', '2%', '3')),
            'hsl(1%,2,3)': (Syntax.HSL, ('1%', '2', '3')),
            'rgba(1,2,3,0.5)': (Syntax.RGBA, ('1', '2', '3', '0.5')),
            'hsla(1,2%,3%,4%)': (Syntax.HSLA, ('1', '2%', '3%', '4%')),
            'TRANSPARENT': (Syntax.TRANSPARENT, ()),
            'AliceBlue': (Syntax.NAME, ('aliceblue',)),
            'NotAColor': (Syntax.NAME, ('notacolor',)),
        }.items():
            with self.subTest(text=text):
                self.assertEqual(match_syntax(text), expected)

    def test_no_match(self) -> None:
        for text in ('', '#abcd', 'rgb(1,2,3', 'rgb(1,2,3,4)', 'rgba(1,2,3)', 'xrgb(1,2,3)', 'no-color', 'red!'):
            with self.subTest(text=text):
                self.assertIsNone(match_syntax(text))

    def test_natural_shapes(self) -> None:
        self.assertEqual(parse_description('#ff0000'), ('rgb', (1.0, 0.0, 0.0)))
        self.assertEqual(parse_description('hsl(90, 10%, 20%)'), ('hsl', (90, 0.1, 0.2)))
        self.assertEqual(
            parse_description('transparent'), ('rgba', (0.0, 0.0, 0.0, 0.0))
        )
        self.assertEqual(parse_description('white'), ('rgb', (1.0, 1.0, 1.0)))


class TestStringify(unittest.TestCase):

    def test_format_spec(self) -> None:
        self.assertEqual(parse_format_spec(''), (Format.FUNCTION, 5))
        self.assertEqual(parse_format_spec('h'), (Format.HEX, 5))
        self.assertEqual(parse_format_spec('.3s'), (Format.CSS, 3))
        self.assertEqual(parse_format_spec('.12'), (Format.FUNCTION, 12))
        for spec in ('x', '.', '3f', '.abc', '.123'):
            with self.subTest(spec=spec):
                with self.assertRaises(ValueError):
                    parse_format_spec(spec)

    def test_function_notation(self) -> None:
        self.assertEqual(str(Rgb(1, 0, 0)), 'rgb(1.0, 0.0, 0.0)')
        self.assertEqual(str(Hsl(120, 0.5, 0.25)), 'hsl(120.0, 0.5, 0.25)')
        self.assertEqual(f'{Rgb.from_rgb256(0, 128, 0):.3f}', 'rgb(0.0, 0.502, 0.0)')

    def test_hex_notation(self) -> None:
        self.assertEqual(f'{Rgb.from_rgb256(49, 120, 234):h}', '#3178ea')
        self.assertEqual(f'{Rgba.from_rgb256(49, 120, 234, 0.5):h}', '#3178ea80')
        with self.assertRaises(ValueError):
            stringify('hsl', (0.0, 0.0, 0.0), Format.HEX)

    def test_css_notation(self) -> None:
        self.assertEqual(f'{Rgb.from_rgb256(49, 120, 234):s}', 'rgb(49, 120, 234)')
        self.assertEqual(f'{Rgba(0, 0, 0, 0):s}', 'rgba(0, 0, 0, 0.0)')
        self.assertEqual(f'{Hsl(120, 0.5, 0.07):s}', 'hsl(120, 50%, 7%)')
        self.assertEqual(f'{Hsla(240, 1, 0.5, 0.25):s}', 'hsla(240, 100%, 50%, 0.25)')

    def test_css_round_trip(self) -> None:
        for text in (
            'rgb(49, 120, 234)',
            'rgba(1, 2, 3, 50%)',
            'rgba(255, 255, 255, 0.3)',
            'hsl(300, 7%, 93%)',
            'hsla(15, 100%, 0%, 33%)',
            'hsla(720, 20%, 40%, 0.9)',
            'transparent',
            'PapayaWhip',
        ):
            with self.subTest(text=text):
                parsed = parse(Colorant, text)
                self.assertEqual(parse(Colorant, f'{parsed:s}'), parsed)
