from .version import __version__
from .models.bean import LEFT, RIGHT, Bean, LuckBean, SkillBean, create_bean
from .models.board import NO_BEAN_IN_YPOS, BeanCounter
