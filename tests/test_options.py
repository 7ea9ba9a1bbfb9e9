from unittest import TestCase

from flatkeys.errors import ConfigurationError
from flatkeys.options import KeyFormat, DEFAULTS


class TestKeyFormat(TestCase):

    def test_defaults(self):
        options = KeyFormat()
        self.assertEqual(options.prefix, '')
        self.assertEqual(options.suffix, '.')
        self.assertFalse(options.suffix_end)
        self.assertEqual(options.prefix_list, '[')
        self.assertEqual(options.suffix_list, ']')
        self.assertTrue(options.suffix_list_end)

    def test_explicit_values_are_kept(self):
        options = KeyFormat(suffix='', suffix_list_end=False)
        self.assertEqual(options.suffix, '')
        self.assertFalse(options.suffix_list_end)
        self.assertEqual(options.prefix_list, DEFAULTS['prefix_list'])

    def test_from_dict_hyphenated(self):
        options = KeyFormat.from_dict({'prefix': '{', 'suffix-end': True, 'suffix_list': ')'})
        self.assertEqual(options, KeyFormat(prefix='{', suffix_end=True, suffix_list=')'))

    def test_from_dict_none_means_default(self):
        self.assertEqual(KeyFormat.from_dict({'suffix': None}).suffix, '.')

    def test_from_dict_unknown(self):
        with self.assertRaises(ConfigurationError):
            KeyFormat.from_dict({'separator': '/'})

    def test_invalid_type(self):
        with self.assertRaises(ConfigurationError):
            KeyFormat(suffix=1)
        with self.assertRaises(ConfigurationError):
            KeyFormat(suffix_end='yes')

    def test_to_dict(self):
        options = KeyFormat.preset('braces')
        self.assertEqual(options.to_dict(), {
            'prefix': '{',
            'suffix': '}',
            'suffix-end': True,
            'prefix-list': '[',
            'suffix-list': ']',
            'suffix-list-end': True,
        })
        self.assertEqual(KeyFormat.from_dict(options.to_dict()), options)

    def test_presets(self):
        self.assertEqual(KeyFormat.preset('default'), KeyFormat())
        self.assertEqual(KeyFormat.preset('arrow').suffix, '->')
        self.assertEqual(KeyFormat.preset('path').suffix, '/')
        with self.assertRaises(ConfigurationError):
            KeyFormat.preset('nope')

    def test_coerce(self):
        options = KeyFormat(prefix='<')
        self.assertIs(KeyFormat.coerce(options), options)
        self.assertEqual(KeyFormat.coerce(None), KeyFormat())
        self.assertEqual(KeyFormat.coerce({'prefix': '<'}), options)
        with self.assertRaises(ConfigurationError):
            KeyFormat.coerce('prefix')

    def test_list_delimited(self):
        self.assertTrue(KeyFormat().list_delimited)
        self.assertTrue(KeyFormat(prefix_list='').list_delimited)
        self.assertFalse(KeyFormat.preset('arrow').list_delimited)

    def test_delimiters_order(self):
        self.assertEqual(KeyFormat.preset('braces').delimiters, ('}', '{', '[', ']'))
