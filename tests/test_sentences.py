"""
Tests for sentence segmentation
"""
from quizgen.services.sentences import extract_sentences


class TestExtractSentences:
    def test_sample_sentences(self, sample_text):
        sentences = extract_sentences(sample_text)
        assert len(sentences) == 5
        assert sentences[0].startswith("Artificial Intelligence (AI)")
        assert sentences[-1].endswith("deployment of AI systems")

    def test_length_bounds(self):
        text = "Short one. " + "x" * 20 + ". " + "y" * 21 + "! " + "z" * 200 + "? " + "w" * 199 + "."
        assert extract_sentences(text) == ["y" * 21, "w" * 199]

    def test_runs_of_terminators(self):
        text = "Is this really the right answer?!... Yes it certainly seems to be right!!"
        assert extract_sentences(text) == [
            "Is this really the right answer",
            "Yes it certainly seems to be right",
        ]

    def test_takes_first_ten(self):
        text = " ".join(f"This is sentence number {i} of the text." for i in range(15))
        sentences = extract_sentences(text)
        assert len(sentences) == 10
        assert sentences[-1] == "This is sentence number 9 of the text"

    def test_every_sentence_within_bounds(self, sample_text):
        for s in extract_sentences(sample_text * 3, limit=50):
            assert 20 < len(s) < 200
            assert s == s.strip()
