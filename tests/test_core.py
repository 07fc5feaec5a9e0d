import random
import unittest

from chordie.analysis.analyzer import ChordMatch
from chordie.core import detect_chord, is_accepted, resolve
from chordie.theory.spelling import note_name_to_midi
from chordie.theory.templates import get_template


def notes(*names):
    return [note_name_to_midi(name) for name in names]


class TestDetectChordEdgeCases(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(detect_chord([]), "")
        self.assertEqual(resolve([]).stage, "empty")

    def test_single_note(self):
        self.assertEqual(detect_chord([60]), "C")
        self.assertEqual(detect_chord(notes("F#5")), "F#")

    def test_octaves_count_as_single_note(self):
        result = resolve([48, 60, 72])
        self.assertEqual(result.label, "C")
        self.assertEqual(result.stage, "single")

    def test_single_note_spelling_follows_key(self):
        self.assertEqual(detect_chord([63], False, "E"), "D#")
        self.assertEqual(detect_chord([63], False, "Eb"), "Eb")
        self.assertEqual(detect_chord(notes("C#4"), key="Db"), "Db")
        self.assertEqual(detect_chord(notes("Db4"), key="D"), "C#")
        self.assertEqual(detect_chord(notes("Ab4"), key="Ab"), "Ab")

    def test_out_of_range_notes_do_not_raise(self):
        self.assertEqual(detect_chord([-12, -8, -5]), "C")
        self.assertEqual(detect_chord([200]), "G#")


class TestDetectChordTriads(unittest.TestCase):
    def test_major(self):
        self.assertEqual(detect_chord([60, 64, 67]), "C")
        self.assertEqual(detect_chord(notes("D4", "F#4", "A4")), "D")
        self.assertEqual(detect_chord(notes("G3", "B3", "D4")), "G")

    def test_minor(self):
        self.assertEqual(detect_chord([57, 60, 64]), "Am")
        self.assertEqual(detect_chord(notes("D4", "F4", "A4")), "Dm")

    def test_diminished(self):
        self.assertEqual(detect_chord(notes("B3", "D4", "F4")), "Bdim")

    def test_augmented_resolves_to_bass(self):
        self.assertEqual(detect_chord(notes("C4", "E4", "G#4")), "Caug")
        self.assertEqual(detect_chord(notes("Eb4", "G4", "B4"), key="Eb"), "Ebaug")

    def test_suspended(self):
        self.assertEqual(detect_chord(notes("C4", "F4", "G4")), "Csus4")
        self.assertEqual(detect_chord(notes("D4", "E4", "A4")), "Dsus2")

    def test_power_chord(self):
        self.assertEqual(detect_chord([48, 55]), "C5")
        self.assertEqual(detect_chord(notes("E2", "B2")), "E5")


class TestDetectChordSevenths(unittest.TestCase):
    def test_basic_sevenths(self):
        self.assertEqual(detect_chord(notes("C4", "E4", "G4", "B4")), "Cmaj7")
        self.assertEqual(detect_chord([55, 59, 62, 65]), "G7")
        self.assertEqual(detect_chord(notes("A3", "C4", "E4", "G4")), "Am7")

    def test_minor_major_seventh(self):
        self.assertEqual(detect_chord(notes("C4", "Eb4", "G4", "B4")), "Cm(maj7)")

    def test_half_diminished_prefers_bass_root(self):
        self.assertEqual(detect_chord(notes("B3", "D4", "F4", "A4")), "Bm7b5")
        self.assertEqual(detect_chord(notes("E4", "G4", "Bb4", "D5")), "Em7b5")

    def test_diminished_seventh_is_one_of_four(self):
        result = detect_chord(notes("B3", "D4", "F4", "Ab4"))
        self.assertIn(result, ["Bdim7", "Ddim7", "Fdim7", "Abdim7", "G#dim7"])

    def test_diminished_seventh_named_from_bass(self):
        self.assertEqual(detect_chord(notes("B3", "D4", "F4", "Ab4")), "Bdim7")
        self.assertEqual(detect_chord(notes("F#4", "A4", "C5", "Eb5")), "F#dim7")


class TestDetectChordExtensions(unittest.TestCase):
    def test_major_ninth_absorbs_extension(self):
        self.assertEqual(detect_chord([60, 64, 67, 71, 62]), "Cmaj9")

    def test_minor_ninth_both_voicings(self):
        self.assertEqual(detect_chord(notes("A3", "B3", "C4", "E4", "G4")), "Am9")
        self.assertEqual(detect_chord(notes("A3", "C4", "E4", "G4", "B4")), "Am9")

    def test_minor_major_ninth(self):
        self.assertEqual(
            detect_chord(notes("A3", "C4", "E4", "G#4", "B4")), "Am(maj9)"
        )

    def test_sharp_eleven_extension(self):
        self.assertEqual(
            detect_chord(notes("G3", "B3", "D4", "F4", "C#5")), "G7(#11)"
        )


class TestDetectChordSlash(unittest.TestCase):
    def test_first_inversion_flat_key(self):
        self.assertEqual(detect_chord(notes("Bb3", "Eb4", "G4"), key="Eb"), "Eb/Bb")
        self.assertEqual(detect_chord(notes("Bb3", "Eb4", "G4"), key="G"), "D#/A#")

    def test_sharp_bass(self):
        self.assertEqual(detect_chord(notes("F#2", "D3", "F#3", "A3"), key="D"), "D/F#")
        self.assertEqual(detect_chord(notes("F#2", "D3", "F#3", "A3"), key="Bb"), "D/Gb")

    def test_bass_in_middle_voice(self):
        self.assertEqual(detect_chord([70, 62, 65, 69], False, "Bb"), "Bbmaj7/D")

    def test_root_position_has_no_slash(self):
        self.assertEqual(detect_chord(notes("Bb2", "D4", "F4", "A4"), key="Bb"), "Bbmaj7")
        self.assertEqual(detect_chord(notes("Bb2", "D4", "F4", "A4"), key="G"), "A#maj7")
        self.assertEqual(detect_chord(notes("F#2", "A3", "C#4", "E4"), key="D"), "F#m7")
        self.assertEqual(detect_chord(notes("F#2", "A3", "C#4", "E4"), key="Bb"), "Gbm7")
        self.assertEqual(detect_chord(notes("Gb2", "Bb3", "Db4", "F4"), key="Gb"), "Gbmaj7")
        self.assertEqual(detect_chord(notes("Gb2", "Bb3", "Db4", "F4"), key="G"), "F#maj7")

    def test_key_of_c_spells_flats(self):
        self.assertEqual(detect_chord(notes("C#4", "F4", "G#4"), key="C"), "Db")
        self.assertEqual(detect_chord(notes("C#4", "F4", "G#4")), "C#")

    def test_flat_key_minor_diminished(self):
        self.assertEqual(detect_chord(notes("C4", "Eb4", "Gb4"), key="F"), "Cdim")


class TestEnforceRoot(unittest.TestCase):
    def test_forced_root_changes_name(self):
        self.assertEqual(detect_chord([60, 64, 67, 69]), "Am7/C")
        self.assertEqual(detect_chord([60, 64, 67, 69], enforce_root_note=True), "C6")

    def test_polychord_fallback(self):
        result = resolve([59, 60, 64, 67], enforce_root_note=True)
        self.assertEqual(result.label, "C + Em")
        self.assertEqual(result.stage, "triads")

    def test_single_triad_fallback(self):
        result = resolve([62, 64, 67, 72], enforce_root_note=True)
        self.assertEqual(result.label, "C")
        self.assertEqual(result.stage, "triads")


class TestFallbackReachability(unittest.TestCase):
    def test_semitone_cluster(self):
        result = resolve([60, 61, 62])
        self.assertEqual(result.label, "D(b7 7 R)")
        self.assertEqual(result.stage, "intervals")
        self.assertIsNone(result.match)

    def test_two_note_third(self):
        self.assertEqual(detect_chord([60, 64]), "C(R 3)")

    def test_every_cluster_produces_text(self):
        for start in range(12):
            for width in range(2, 7):
                label = detect_chord(range(48 + start, 48 + start + width))
                self.assertTrue(label)


class TestProperties(unittest.TestCase):
    def test_order_and_duplicates_do_not_matter(self):
        rng = random.Random(7)
        base = [57, 60, 64, 67, 71]
        expected = detect_chord(base)
        for _ in range(20):
            shuffled = base + rng.sample(base, 3)
            rng.shuffle(shuffled)
            self.assertEqual(detect_chord(shuffled), expected)

    def test_template_stage_reports_accepted_match(self):
        result = resolve([60, 64, 67])
        self.assertEqual(result.stage, "template")
        self.assertEqual(result.match.template.symbol, "")
        self.assertTrue(is_accepted(result.match))


def _partial_match(coverage, score):
    template = get_template("7#11")
    return ChordMatch(
        root=6,
        template=template,
        matched_intervals=(0, 4, 6, 10),
        coverage=coverage,
        exactness=1.0,
        score=score,
    )


class TestAcceptanceGate(unittest.TestCase):
    def test_coverage_at_threshold_is_accepted(self):
        self.assertTrue(is_accepted(_partial_match(0.8, 464.0)))

    def test_coverage_below_threshold_is_rejected(self):
        self.assertFalse(is_accepted(_partial_match(0.75, 464.0)))

    def test_score_must_exceed_threshold(self):
        self.assertFalse(is_accepted(_partial_match(0.6, 500.0)))
        self.assertTrue(is_accepted(_partial_match(0.6, 500.5)))

    def test_four_of_five_tones_named_from_template(self):
        # C C# E F#: F#7#11 missing its fifth
        result = resolve([60, 61, 64, 66])
        self.assertEqual(result.stage, "template")
        self.assertEqual(result.label, "F#7#11/C")
        self.assertAlmostEqual(result.match.coverage, 0.8)
        self.assertAlmostEqual(result.match.score, 464.0)


if __name__ == "__main__":
    unittest.main()
