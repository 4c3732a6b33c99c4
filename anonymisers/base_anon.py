class BaseAnonymiser:
    """
    Takes frame + face regions -> anonymises the frame in place and returns it.
    """
    def apply(self, frame, faces):
        raise NotImplementedError
