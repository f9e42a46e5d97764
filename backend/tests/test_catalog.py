from songbank.catalog import SINGLE_LABEL, generate_detail, generate_page, sample_likes
from songbank.locales import DEFAULT_LOCALE, Locale, get_profile, supported_locales
from songbank.seeds import page_seed


def _without_likes(songs):
    return [{k: v for k, v in s.to_dict().items() if k != "likes"} for s in songs]


def test_locale_registry_has_twelve_genres_each():
    profiles = supported_locales()
    assert [p.locale for p in profiles] == [Locale.EN_US, Locale.DE_DE, Locale.UK_UA]
    for profile in profiles:
        assert len(profile.genres) == 12
        assert len(set(profile.genres)) == 12


def test_unknown_locale_falls_back_to_default():
    assert Locale.resolve("fr-FR") is DEFAULT_LOCALE
    assert Locale.resolve(None) is DEFAULT_LOCALE
    assert Locale.resolve("de-DE") is Locale.DE_DE
    assert get_profile("xx").locale is Locale.EN_US


def test_page_is_deterministic():
    a = generate_page("en-US", 42, 1, 20, 0)
    b = generate_page("en-US", 42, 1, 20, 0)
    assert [s.to_dict() for s in a] == [s.to_dict() for s in b]


def test_page_is_deterministic_apart_from_likes():
    a = generate_page("uk-UA", 7, 2, 10, 3.7)
    b = generate_page("uk-UA", 7, 2, 10, 3.7)
    assert _without_likes(a) == _without_likes(b)


def test_indices_for_page_three():
    songs = generate_page("en-US", 42, 3, 20, 0)
    assert [s.index for s in songs] == list(range(41, 61))


def test_item_seeds_follow_page_seed():
    songs = generate_page("en-US", 42, 1, 5, 0)
    ps = page_seed(42, 1)
    assert [s.item_seed for s in songs] == [ps + i for i in range(5)]


def test_zero_page_size_is_empty():
    assert generate_page("en-US", 42, 1, 0, 5) == []


def test_changing_page_changes_songs():
    page1 = generate_page("en-US", 42, 1, 20, 0)
    page2 = generate_page("en-US", 42, 2, 20, 0)
    assert [s.title for s in page1] != [s.title for s in page2]
    assert {s.item_seed for s in page1}.isdisjoint({s.item_seed for s in page2})


def test_changing_seed_changes_songs():
    a = generate_page("en-US", 1, 1, 20, 0)
    b = generate_page("en-US", 2, 1, 20, 0)
    assert [(s.title, s.artist) for s in a] != [(s.title, s.artist) for s in b]


def test_genres_come_from_locale_vocabulary():
    genres = set(get_profile("de-DE").genres)
    for user_seed in (0, 42, 2**63 + 11):
        for song in generate_page("de-DE", user_seed, 1, 20, 0):
            assert song.genre in genres


def test_unknown_locale_matches_default_locale_output():
    a = generate_page("xx-XX", 99, 4, 8, 0)
    b = generate_page("en-US", 99, 4, 8, 0)
    assert [s.to_dict() for s in a] == [s.to_dict() for s in b]


def test_song_fields_are_well_formed():
    profile = get_profile("en-US")
    for song in generate_page("en-US", 123, 1, 30, 0):
        words = song.title.split(" ")
        assert len(words) in (2, 3)
        assert all(w[:1] == w[:1].upper() for w in words)
        assert all(w.lower() in profile.adjectives for w in words)
        assert song.artist
        assert song.album == SINGLE_LABEL or len(song.album.split(" ")) == 3
        assert song.likes == 0


def test_sample_likes_bounds():
    for _ in range(500):
        assert sample_likes(2.5) in (2, 3)
    assert sample_likes(0) == 0
    assert sample_likes(4.0) == 4


def test_sample_likes_uses_fractional_part_as_probability():
    assert sample_likes(2.5, source=lambda: 0.49) == 3
    assert sample_likes(2.5, source=lambda: 0.5) == 2
    assert sample_likes(0.1, source=lambda: 0.0) == 1


def test_page_likes_use_injected_source():
    songs = generate_page("en-US", 5, 1, 6, 2.5, likes_source=lambda: 0.9)
    assert {s.likes for s in songs} == {2}


def test_detail_is_reproducible_and_has_three_paragraphs():
    a = generate_detail("de-DE", 3397979675)
    b = generate_detail("de-DE", 3397979675)
    assert a == b
    assert len(a.paragraphs) == 3
    assert a.review == "\n\n".join(a.paragraphs)
    assert all(p.strip() for p in a.paragraphs)


def test_detail_depends_on_seed():
    assert generate_detail("en-US", 1).review != generate_detail("en-US", 2).review


def test_detail_does_not_depend_on_page_generation():
    before = generate_detail("en-US", 555)
    generate_page("en-US", 555, 1, 20, 0)
    assert generate_detail("en-US", 555) == before
