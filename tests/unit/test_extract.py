import unittest

from splitalign.constants import DECLINE, STRAND
from splitalign.error import InvalidConfigurationError
from splitalign.extract import BreakpointExtractor, ExtractResult, parse_target_regions, read_name_target_filter
from splitalign.interval import Interval

from .mock import mock_read

SEQ = 'ACGT' * 25


def secondary(cigar, start, **kwargs):
    return mock_read(cigar, start=start, primary=False, supplementary=True, **kwargs)


class TestExtract(unittest.TestCase):

    def test_leading_hard_clip(self):
        primary = mock_read('40M60S', start=1000, query_sequence=SEQ)
        other = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:])
        result = BreakpointExtractor(read_length=10).extract(primary, other)
        self.assertTrue(result)
        bp = result.breakpoint
        self.assertEqual(('chr1', 1040, 'chr2', 5000), bp.key)
        self.assertEqual(SEQ[30:50], bp.bases)
        self.assertEqual('read1', bp.read_id)
        self.assertEqual(STRAND.FORWARD, bp.left_strand)

    def test_trailing_clip(self):
        primary = mock_read('60S40M', start=1000, query_sequence=SEQ)
        other = secondary('60M40H', 5000, reference_name='chr2', query_sequence=SEQ[:60], is_reverse=True)
        result = BreakpointExtractor(read_length=10).extract(primary, other)
        bp = result.breakpoint
        self.assertEqual(('chr2', 5060, 'chr1', 1000), bp.key)
        self.assertEqual(SEQ[50:70], bp.bases)
        self.assertEqual(STRAND.REVERSE, bp.left_strand)
        self.assertEqual(STRAND.FORWARD, bp.right_strand)

    def test_bases_clamped_to_read(self):
        primary = mock_read('40M60S', start=1000, query_sequence=SEQ)
        other = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:])
        result = BreakpointExtractor().extract(primary, other)
        self.assertEqual(SEQ, result.breakpoint.bases)

    def test_target_filter(self):
        primary = mock_read('40M60S', start=1000, query_sequence=SEQ)
        other = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:])
        result = BreakpointExtractor(target_filter=lambda p, s: False).extract(primary, other)
        self.assertFalse(result)
        self.assertEqual(DECLINE.OFF_TARGET, result.reason)

    def test_bad_configuration(self):
        with self.assertRaises(InvalidConfigurationError):
            BreakpointExtractor(read_length=0)
        with self.assertRaises(InvalidConfigurationError):
            BreakpointExtractor(min_mapping_quality=-1)


class TestProcessReadGroup(unittest.TestCase):

    def setUp(self):
        self.extractor = BreakpointExtractor(read_length=10)
        self.primary = mock_read('40M60S', start=1000, query_sequence=SEQ)
        self.other = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:])

    def assertDeclined(self, reason, reads):
        result = self.extractor.process_read_group(reads)
        self.assertFalse(result)
        self.assertEqual(reason, result.reason)

    def test_either_order(self):
        first = self.extractor.process_read_group([self.primary, self.other])
        second = self.extractor.process_read_group([self.other, self.primary])
        self.assertEqual(first.breakpoint, second.breakpoint)

    def test_not_a_pair(self):
        self.assertDeclined(DECLINE.NOT_A_PAIR, [])
        self.assertDeclined(DECLINE.NOT_A_PAIR, [self.primary])
        third = secondary('10M90S', 9000, query_sequence=SEQ)
        self.assertDeclined(DECLINE.NOT_A_PAIR, [self.primary, self.other, third])

    def test_mapping_quality(self):
        low = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:], mapping_quality=19)
        self.assertDeclined(DECLINE.LOW_MAPPING_QUALITY, [self.primary, low])
        low.mapping_quality = 20
        self.assertTrue(self.extractor.process_read_group([self.primary, low]))

    def test_primary_count(self):
        self.assertDeclined(DECLINE.MULTIPLE_PRIMARY, [self.primary, mock_read('40H60M', start=5000)])
        self.assertDeclined(DECLINE.NO_PRIMARY, [secondary('40M60S', 1000), self.other])


class TestExtractResult(unittest.TestCase):

    def test_requires_reason(self):
        with self.assertRaises(ValueError):
            ExtractResult()


class TestTargetRegions(unittest.TestCase):

    def test_parse(self):
        self.assertEqual(
            (('chr1', Interval(100, 200)), ('chr2', Interval(500, 600))),
            parse_target_regions('chr1_100_200__chr2_500_600_0_1'))

    def test_parse_underscore_chromosomes(self):
        self.assertEqual(
            (('chrUn_gl000220', Interval(1, 50)), ('chr1_random', Interval(7, 9))),
            parse_target_regions('chrUn_gl000220_1_50__chr1_random_7_9_3_4'))

    def test_not_encoded(self):
        for name in ['read1', 'a_b_c__d_e_f_g_h', 'chr1_100_200__chr2_500_600', 'chr1_200_100__chr2_5_6_0_1']:
            self.assertIsNone(parse_target_regions(name))

    def test_read_name_filter(self):
        name = 'chr1_1000_1100__chr2_5000_5100_0_1'
        primary = mock_read('40M60S', start=1000, query_sequence=SEQ, query_name=name)
        other = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:], query_name=name)
        self.assertTrue(read_name_target_filter(primary, other))

        name = 'chr1_1000_1100__chr3_5000_5100_0_1'
        primary.query_name = name
        self.assertFalse(read_name_target_filter(primary, other))

        primary.query_name = 'read1'
        self.assertFalse(read_name_target_filter(primary, other))

    def test_filter_applied_in_read_group(self):
        extractor = BreakpointExtractor(target_filter=read_name_target_filter)
        primary = mock_read('40M60S', start=1000, query_sequence=SEQ)
        other = secondary('40H60M', 5000, reference_name='chr2', query_sequence=SEQ[40:])
        self.assertEqual(DECLINE.OFF_TARGET, extractor.process_read_group([primary, other]).reason)


if __name__ == '__main__':
    unittest.main()
