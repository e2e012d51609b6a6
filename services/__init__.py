# -*- coding: utf-8 -*-
"""
Template Studio Service Layer
"""
