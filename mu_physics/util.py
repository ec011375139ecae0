"""Utility functions

"""
import lz4.frame
import cloudpickle


def load(filename):
    """Load a saved event (or any saved object) from disk"""
    with lz4.frame.open(filename) as fin:
        output = cloudpickle.load(fin)
    return output


def save(output, filename):
    """Save an event or collection thereof to disk

    This function can accept any picklable object.  Suggested suffix: ``.mu``
    """
    with lz4.frame.open(filename, "wb") as fout:
        thepickle = cloudpickle.dumps(output)
        fout.write(thepickle)
