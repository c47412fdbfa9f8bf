from typing import Literal


existing_resources = Literal["ibm_sm_en_registration"]
