import cProfile, pstats

PROFILE_INIT = True
if PROFILE_INIT:
    profiler = cProfile.Profile()
    profiler.enable()
from src.guitar import Guitar, FretboardRequest
from src.matching import matching_chords, matching_scales
from src.keys import matching_keys
from src.voicings import get_voicings
from src.positions import scale_positions

# individual test modules:
from src.test import test_util, test_parsing, test_qualities, test_intervals, test_notes, test_tuning
from src.test import test_chords, test_matching, test_keys, test_voicings, test_positions
from src.test import test_display, test_guitar

from src import util
if PROFILE_INIT:

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('cumtime')
    stats.print_stats(20)

util.log.verbose = False

PROFILE_EACH = False

modules_to_test = [
                  test_util,
                  test_parsing,
                  test_qualities,
                  test_intervals,
                  test_notes,
                  test_tuning,
                  test_chords,
                  test_matching,
                  test_keys,
                  test_voicings,
                  test_positions,
                  test_display,
                  test_guitar,
                  ]

def run_all_tests():
    for module in modules_to_test:

        @profile
        def module_test():
            print(f'Testing {module.__name__}')
            module.unit_test()
            print(f' + {module.__name__} test passed + ')

        module_test()
    print(f'+++ All tests passed +++')

def profile(func):
    def wrapper():
        if PROFILE_EACH:
            profiler = cProfile.Profile()
            profiler.enable()
            func()
            profiler.disable()
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(6)
        else:
            func()
    return wrapper

if PROFILE_EACH:
    run_all_tests()
else:
    # profile them all together:
    profiler = cProfile.Profile()
    profiler.enable()

    run_all_tests()

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('tottime')
    print('='*20 + '\nPROFILING:\n' + '='*20)
    stats.print_stats(20)
