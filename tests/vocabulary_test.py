import threading
import unittest

from lexical_bool import TRUTHY_VALUES, FALSEY_VALUES
from lexical_bool import Vocabulary, current_vocabulary, initialize_true_values, initialize_false_values, parse
from tests.conftest_threads import run_in_fresh_thread


class TestVocabulary(unittest.TestCase):

    def test_lookup(self):
        vocabulary = Vocabulary(truthy=('foo',), falsey=('bar',))
        self.assertIs(vocabulary.lookup('foo'), True)
        self.assertIs(vocabulary.lookup('bar'), False)
        self.assertIsNone(vocabulary.lookup('baz'))

    def test_defaults(self):
        vocabulary = Vocabulary()
        self.assertEqual(vocabulary.truthy, ('true', 't', '1', 'yes'))
        self.assertEqual(vocabulary.falsey, ('false', 'f', '0', 'no'))
        self.assertEqual(vocabulary.allowed_values, TRUTHY_VALUES + FALSEY_VALUES)


class TestInitialization(unittest.TestCase):

    def test_first_write_wins(self):
        def scenario():
            first = initialize_true_values(['foo', 'bar'])
            second = initialize_true_values(['true', '1'])
            return first, second, current_vocabulary().truthy

        self.assertEqual(run_in_fresh_thread(scenario), (True, False, ('foo', 'bar')))

    def test_sets_fix_independently(self):
        def scenario():
            return (initialize_true_values(['foo']),
                    initialize_false_values(['bar']),
                    initialize_false_values(['baz']))

        self.assertEqual(run_in_fresh_thread(scenario), (True, True, False))

    def test_parse_fixes_defaults(self):
        def scenario():
            parse('true')
            return initialize_true_values(['x']), initialize_false_values(['y'])

        self.assertEqual(run_in_fresh_thread(scenario), (False, False))

    def test_failed_parse_still_fixes_defaults(self):
        def scenario():
            with self.assertRaises(ValueError):
                parse('x')
            return initialize_true_values(['x'])

        self.assertFalse(run_in_fresh_thread(scenario))

    def test_current_vocabulary_fixes_unset_sets(self):
        def scenario():
            initialize_false_values(['nah'])
            vocabulary = current_vocabulary()
            return vocabulary, initialize_true_values(['yeah'])

        vocabulary, initialized = run_in_fresh_thread(scenario)
        self.assertEqual(vocabulary, Vocabulary(truthy=TRUTHY_VALUES, falsey=('nah',)))
        self.assertFalse(initialized)

    def test_tokens_are_deduplicated_and_stringified(self):
        def scenario():
            initialize_true_values(['a', 'b', 'a', 1])
            return current_vocabulary().truthy

        self.assertEqual(run_in_fresh_thread(scenario), ('a', 'b', '1'))

    def test_generator_tokens(self):
        def scenario():
            initialize_false_values(token for token in ['n', 'nay'])
            return parse('nay')

        self.assertEqual(run_in_fresh_thread(scenario), False)

    def test_empty_tokens(self):
        def scenario():
            self.assertTrue(initialize_true_values([]))
            self.assertEqual(parse('no'), False)
            with self.assertRaises(ValueError):
                parse('true')

        run_in_fresh_thread(scenario)

    def test_single_string_rejected(self):
        def scenario():
            with self.assertRaises(TypeError):
                initialize_true_values('yes')
            # the rejected call leaves the set unset
            return initialize_true_values(['yes'])

        self.assertTrue(run_in_fresh_thread(scenario))


class TestThreadIsolation(unittest.TestCase):

    def test_threads_do_not_share_vocabulary(self):
        ready = threading.Event()
        done = threading.Event()
        results = {}

        def customizer():
            results['custom_init'] = initialize_true_values(['foo'])
            ready.set()
            done.wait(timeout=5)
            results['custom_parse'] = parse('foo')

        def other():
            ready.wait(timeout=5)
            results['other_init'] = initialize_true_values(['bar'])
            results['other_parse'] = parse('bar')
            done.set()

        threads = [threading.Thread(target=customizer), threading.Thread(target=other)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        self.assertEqual(results, {
            'custom_init': True,
            'other_init': True,
            'custom_parse': True,
            'other_parse': True,
        })

    def test_fresh_thread_after_main_thread_parse(self):
        parse('yes')
        self.assertFalse(initialize_true_values(['x']))
        self.assertTrue(run_in_fresh_thread(initialize_true_values, ['x']))


if __name__ == '__main__':
    unittest.main()
