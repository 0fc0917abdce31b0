from rewarder.merkle.hashing import *
from rewarder.merkle.tree import *
from rewarder.merkle.builder import *
