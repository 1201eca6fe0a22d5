import unittest

from splitalign.bam import cigar as _cigar
from splitalign.bam.cigar import AlignmentBlock, convert_cigar_to_string, convert_string_to_cigar, decompose
from splitalign.constants import CIGAR
from splitalign.error import MalformedCigarError


class TestDecompose(unittest.TestCase):

    def test_single_match(self):
        blocks = decompose(100, [(CIGAR.M, 50)])
        self.assertEqual([AlignmentBlock(CIGAR.M, 50, 100, 149, 1, 50)], blocks)
        self.assertEqual(50, blocks[0].reference_length)
        self.assertEqual(50, blocks[0].read_length)

    def test_clipped_match(self):
        blocks = decompose(155, [(CIGAR.S, 10), (CIGAR.M, 50)])
        self.assertEqual(AlignmentBlock(CIGAR.S, 10, 155, 154, 1, 10), blocks[0])
        self.assertEqual(AlignmentBlock(CIGAR.M, 50, 155, 204, 11, 60), blocks[1])

    def test_indels_and_skip(self):
        blocks = decompose(1, convert_string_to_cigar('5S10M2D3I4N6M5S'))
        self.assertEqual([
            AlignmentBlock(CIGAR.S, 5, 1, 0, 1, 5),
            AlignmentBlock(CIGAR.M, 10, 1, 10, 6, 15),
            AlignmentBlock(CIGAR.D, 2, 11, 12, 16, 15),
            AlignmentBlock(CIGAR.I, 3, 13, 12, 16, 18),
            AlignmentBlock(CIGAR.N, 4, 13, 16, 19, 18),
            AlignmentBlock(CIGAR.M, 6, 17, 22, 19, 24),
            AlignmentBlock(CIGAR.S, 5, 23, 22, 25, 29),
        ], blocks)

    def test_read_space_is_contiguous(self):
        blocks = decompose(1000, convert_string_to_cigar('3S7=1X2I4D9M1S'))
        for prev, curr in zip(blocks, blocks[1:]):
            self.assertEqual(prev.read_stop + 1, curr.read_start)
            self.assertLessEqual(prev.reference_start, curr.reference_start)

    def test_hard_clip_consumes_nothing(self):
        blocks = decompose(10, [(CIGAR.H, 5), (CIGAR.M, 10)])
        self.assertEqual(AlignmentBlock(CIGAR.H, 5, 10, 9, 1, 0), blocks[0])
        self.assertEqual(AlignmentBlock(CIGAR.M, 10, 10, 19, 1, 10), blocks[1])

    def test_empty_cigar_error(self):
        with self.assertRaises(MalformedCigarError):
            decompose(1, [])
        with self.assertRaises(MalformedCigarError):
            decompose(1, None)

    def test_zero_length_element_error(self):
        with self.assertRaises(MalformedCigarError):
            decompose(1, [(CIGAR.M, 0)])

    def test_unknown_state_error(self):
        with self.assertRaises(MalformedCigarError):
            decompose(1, [(CIGAR.P, 4), (CIGAR.M, 10)])


class TestCigarStrings(unittest.TestCase):

    def test_convert_string(self):
        self.assertEqual(
            [(CIGAR.M, 8), (CIGAR.I, 2), (CIGAR.D, 1), (CIGAR.X, 9), (CIGAR.EQ, 3)],
            convert_string_to_cigar('8M2I1D9X3='))

    def test_convert_back(self):
        self.assertEqual('50M4D45M', convert_cigar_to_string([(CIGAR.M, 50), (CIGAR.D, 4), (CIGAR.M, 45)]))
        self.assertEqual('3=1X', convert_cigar_to_string([(CIGAR.EQ, 3), (CIGAR.X, 1)]))

    def test_invalid_string(self):
        for string in ['', '*', 'M10', '10M5']:
            with self.assertRaises(MalformedCigarError):
                convert_string_to_cigar(string)


class TestLengths(unittest.TestCase):

    def test_query_length(self):
        self.assertEqual(28, _cigar.query_length(convert_string_to_cigar('5H5S10M2D3I10M')))

    def test_non_deletion_length(self):
        left = convert_string_to_cigar('5S10M2D')
        right = convert_string_to_cigar('3I10M')
        self.assertEqual(28, _cigar.non_deletion_length(left, right))

    def test_non_clipped_length(self):
        self.assertEqual(23, _cigar.non_clipped_length(convert_string_to_cigar('5S10M2D3I10M5S')))

    def test_mapped_read_range(self):
        blocks = decompose(1, convert_string_to_cigar('5S10M2D3I10M7S'))
        self.assertEqual(6, _cigar.mapped_read_start(blocks))
        self.assertEqual(28, _cigar.mapped_read_end(blocks))

    def test_mapped_read_range_all_clipped(self):
        blocks = decompose(1, [(CIGAR.S, 10)])
        self.assertIsNone(_cigar.mapped_read_start(blocks))
        self.assertIsNone(_cigar.mapped_read_end(blocks))


if __name__ == '__main__':
    unittest.main()
