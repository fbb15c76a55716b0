import time
import inspect

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg):
        if self.verbose:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()

# generically useful functions used across modules:
def rotate_list(lst, num_steps, N=None):
    """Accepts a list, and returns the wrapped-around list
    that begins num_steps up from the beginning of the original.
    used for scale positions, which each start on a different degree
    of the same scale, i.e. position 3 of [R,2,3,4,5,6,7] starts [3,4,5...]
    N uses the length of the list by default"""
    if N is None:
        N = len(lst)
    rotated_idxs = [(num_steps + i) % N for i in range(N)]
    rotated_lst = [lst[i] for i in rotated_idxs]
    return rotated_lst

def unpack_and_reverse_dict(dct, include_keys=False, force_list=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            # we expected the value to be an iterable, but it isn't one
            if force_list:
                # set it to be one anyway:
                v_list = [v_list]
            else:
                raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists of strings")

        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct

def unique_in_order(iterable):
    """returns a list of the unique items in an iterable, in the order they first appear"""
    seen = set()
    out = []
    for item in iterable:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out

def stable_ranking(items, score_key, tiebreak_key=None, max_results=None):
    """sorts items by descending score, keeping the input order (or an
    explicit tiebreak key) among items with equal scores,
    and truncates the result to max_results if given"""
    if tiebreak_key is None:
        ranked = sorted(items, key=lambda x: -score_key(x))
    else:
        ranked = sorted(items, key=lambda x: (-score_key(x), tiebreak_key(x)))
    if max_results is not None:
        ranked = ranked[:max_results]
    return ranked
